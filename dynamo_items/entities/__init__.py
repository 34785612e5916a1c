from dynamo_items.entities.payload import Payload, Payloads

__all__ = ["Payload", "Payloads"]
