"""
Erreurs applicatives.
- ConfigurationError: configuration obligatoire absente (ex: STRIPE_SECRET_KEY).
  Fatale pour la requête, convertie en 500 JSON par app_setup.exceptions.
"""


class ConfigurationError(RuntimeError):
    pass
