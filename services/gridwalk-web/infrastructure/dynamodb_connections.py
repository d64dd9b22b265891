"""DynamoDB implementation of the ConnectionStore interface."""

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError
from gridwalk_common import TableAccessError
from gridwalk_common.logging import setup_logging

from interfaces import ConnectionStore
from response_models import Connection

logger = setup_logging()


class DynamoDBConnectionStore(ConnectionStore):
    """
    Reads connections from the single-table layout.

    Connection items are keyed ``PK = "<prefix><id>"``; everything else in
    the table is skipped by the scan filter.
    """

    def __init__(self, table, prefix: str = "CON#"):
        self._table = table
        self._prefix = prefix

    def list_connections(self) -> list[Connection]:
        scan_kwargs = {"FilterExpression": Attr("PK").begins_with(self._prefix)}
        items = []
        try:
            while True:
                page = self._table.scan(**scan_kwargs)
                items.extend(page.get("Items", []))
                last_key = page.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.exception("Error scanning DynamoDB", extra={"table": self._table.name})
            raise TableAccessError(self._table.name, "scan", e) from e

        return [
            Connection(
                id=item["PK"][len(self._prefix):],
                name=item.get("name"),
                connector=item.get("connector"),
            )
            for item in items
        ]
