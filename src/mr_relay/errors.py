# src/mr_relay/errors.py


class DeliveryError(Exception):
    """Outbound message could not be delivered to the chat bot."""
