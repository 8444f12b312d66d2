# Kana Echo - LINE bot that answers with the readings of your words
# ===================================================================
# Layered Architecture:
#
# ARCHITECTURE LAYERS:
# - Web:            FastAPI webhook endpoint (LINE callback)
# - Application:    Reply pipeline and event dispatch (no business rules)
# - Domain:         Pure business logic (part-of-speech word filter)
# - Infrastructure: External services (LINE Messaging API, COTOHA NLP API)
#
# Swapping the NLP provider or the messaging platform only touches the
# infrastructure layer.
