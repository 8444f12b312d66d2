# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - line/: LINE Messaging API webhook parsing and replies
# - nlp/: COTOHA access token and parse API clients
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting domain/application layers.
