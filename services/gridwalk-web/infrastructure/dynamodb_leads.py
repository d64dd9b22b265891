"""DynamoDB implementation of the LeadStore interface."""

import uuid
from datetime import datetime, timezone

from botocore.exceptions import BotoCoreError, ClientError
from gridwalk_common import TableAccessError
from gridwalk_common.logging import setup_logging

from interfaces import LeadStore

logger = setup_logging()


class DynamoDBLeadStore(LeadStore):
    """Puts one item per captured email into the landing table."""

    def __init__(self, table):
        self._table = table

    def save_email(self, email: str, ip_address: str) -> str:
        item_key = str(uuid.uuid4())
        try:
            self._table.put_item(
                Item={
                    "PK": item_key,
                    "email": email,
                    "ip_address": ip_address,
                    "created_at": datetime.now(timezone.utc).isoformat(),
                }
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "Saving email failed",
                extra={"table": self._table.name},
            )
            raise TableAccessError(self._table.name, "put_item", e) from e

        logger.info("Lead captured", extra={"pk": item_key, "table": self._table.name})
        return item_key
