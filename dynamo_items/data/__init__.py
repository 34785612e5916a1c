from .shared_exceptions import BackendError, ConversionError, DynamoItemsError
from .operations import (
    add_number,
    query_records,
    query_records_with_filter,
    write_payloads,
    write_record,
    write_records,
)
from .dynamo_client import create_client
from .item_access import ItemAccess
