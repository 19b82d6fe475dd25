"""
Tables de traduction statiques (en/fr), une entrée par section d'interface.
Les deux locales exposent exactement les mêmes clés.
"""
from typing import Any, Dict

DICTIONARIES: Dict[str, Dict[str, Dict[str, Any]]] = {
    "en": {
        "nav": {
            "home": "Home",
            "shop": "Watches",
            "configurator": "Custom Build",
            "allWatches": "All watches",
            "contact": "Contact",
            "account": "Account",
            "cart": "Cart",
            "signIn": "Sign In",
            "createAccount": "Create Account",
            "logout": "Logout",
        },
        "cart": {
            "title": "Your cart",
            "empty": "Your cart is empty.",
            "continueShopping": "Continue shopping",
            "subtotal": "Subtotal",
            "checkout": "Proceed to checkout",
            "remove": "Remove",
            "quantity": "Quantity",
            "editBuild": "Edit build",
        },
        "contact": {
            "title": "Contact",
            "heading": "Get in touch.",
            "subtitle": "Inquiries, custom requests, or simply a conversation about time. We reply within one business day.",
            "name": "Name",
            "email": "Email",
            "message": "Message",
            "send": "Send message",
            "success": "Thank you. We will reply shortly.",
        },
        "hero": {
            "title": "Ciavaglia Timepieces",
            "subtitle": "Mechanical art for wrists that command the room.",
            "ctaPrimary": "Configure yours",
            "ctaSecondary": "Explore built pieces",
            "purchaseLabel": "Purchase this watch",
        },
        "home": {
            "promoBar": "Hand-finished timepieces · Limited runs",
            "selectStyle": "Select your style",
            "bestOfAtelier": "Best of the collection",
            "seeMore": "See more",
            "jumpToWatches": "Jump to watches",
            "buildYourOwn": "Build your own",
            "buildYourOwnSub": "Design dial, case, movement, and strap. Live pricing. Reviewed before it ships.",
            "trustLine": "Hand-finished · Limited 12",
            "finalCtaTitle": "Design a signature timepiece that is entirely yours.",
            "finalCtaSub": "Build it in minutes. We will craft it in weeks.",
            "startConfiguring": "Start configuring",
        },
        "shop": {
            "sortBy": "Sort by",
            "priceAscending": "Price: Low to High",
            "priceDescending": "Price: High to Low",
        },
        "configurator": {
            "title": "Design your watch",
            "subtitle": "Choose each component. The total updates as you go.",
            "select": "Select",
            "optional": "Optional",
            "total": "Total",
            "checkout": "Review and pay",
            "startOver": "Start over",
            "unavailable": "The configurator is being updated. Please check back shortly.",
            "checkoutFailed": "Checkout failed. Please try again.",
        },
        "product": {
            "specifications": "Specifications",
            "inStock": "In stock",
            "outOfStock": "Sold out",
            "checkoutFailed": "Checkout failed. Please try again.",
        },
    },
    "fr": {
        "nav": {
            "home": "Accueil",
            "shop": "Montres",
            "configurator": "Construction sur mesure",
            "allWatches": "Toutes les montres",
            "contact": "Contact",
            "account": "Compte",
            "cart": "Panier",
            "signIn": "Connexion",
            "createAccount": "Créer un compte",
            "logout": "Déconnexion",
        },
        "cart": {
            "title": "Votre panier",
            "empty": "Votre panier est vide.",
            "continueShopping": "Continuer les achats",
            "subtotal": "Sous-total",
            "checkout": "Passer la commande",
            "remove": "Retirer",
            "quantity": "Quantité",
            "editBuild": "Modifier le build",
        },
        "contact": {
            "title": "Contact",
            "heading": "Restons en contact.",
            "subtitle": "Demandes, projets sur mesure ou simplement une conversation sur le temps. Nous répondons sous un jour ouvrable.",
            "name": "Nom",
            "email": "E-mail",
            "message": "Message",
            "send": "Envoyer",
            "success": "Merci. Nous vous répondrons sous peu.",
        },
        "hero": {
            "title": "Ciavaglia Timepieces",
            "subtitle": "Des montres mécaniques sur mesure pour des poignets qui s'imposent.",
            "ctaPrimary": "Configurer la vôtre",
            "ctaSecondary": "Découvrir les pièces",
            "purchaseLabel": "Acheter cette montre",
        },
        "home": {
            "promoBar": "Pièces sur mesure · Finition main · Séries limitées",
            "selectStyle": "Choisissez votre style",
            "bestOfAtelier": "Meilleures pièces",
            "seeMore": "Voir plus",
            "jumpToWatches": "Voir les montres",
            "buildYourOwn": "Configurez la vôtre",
            "buildYourOwnSub": "Cadran, boîtier, mouvement et bracelet. Tarification en direct. Validé avant expédition.",
            "trustLine": "Finition main · Série 12",
            "finalCtaTitle": "Dessinez une montre signature entièrement vôtre.",
            "finalCtaSub": "Créez en quelques minutes. Nous fabriquons en quelques semaines.",
            "startConfiguring": "Commencer",
        },
        "shop": {
            "sortBy": "Trier par",
            "priceAscending": "Prix : croissant",
            "priceDescending": "Prix : décroissant",
        },
        "configurator": {
            "title": "Concevez votre montre",
            "subtitle": "Choisissez chaque composant. Le total se met à jour au fil des choix.",
            "select": "Choisissez",
            "optional": "Optionnel",
            "total": "Total",
            "checkout": "Vérifier et payer",
            "startOver": "Recommencer",
            "unavailable": "Le configurateur est en cours de mise à jour. Revenez bientôt.",
            "checkoutFailed": "Échec du passage en caisse.",
        },
        "product": {
            "specifications": "Caractéristiques",
            "inStock": "En stock",
            "outOfStock": "Épuisé",
            "checkoutFailed": "Échec du passage en caisse.",
        },
    },
}
