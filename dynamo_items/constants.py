"""Constants shared across dynamo_items."""

# DynamoDB hard limit on items per BatchWriteItem request
BATCH_WRITE_CHUNK_SIZE = 25

# Type descriptors accepted in a low-level attribute value
ATTRIBUTE_TYPES = frozenset(
    {"S", "N", "B", "BOOL", "SS", "NS", "BS", "L", "M", "NULL"}
)

DEFAULT_REGION = "us-east-1"
DEFAULT_CONNECT_TIMEOUT = 60
DEFAULT_READ_TIMEOUT = 60
