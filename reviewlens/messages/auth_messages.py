# reviewlens/messages/auth_messages.py

AUTHENTICATION_REQUIRED = "Not authorized - no user identity provided."
