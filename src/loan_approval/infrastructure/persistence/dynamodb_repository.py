# loan_approval/infrastructure/persistence/dynamodb_repository.py
import json
from datetime import datetime, timezone
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from loan_approval.domain.loan.aggregate import LoanApplication
from loan_approval.domain.loan.repository import ApplicationRepository
from loan_approval.infrastructure.logging.logger import get_logger
from loan_approval.infrastructure.persistence.exceptions import StorageError


class DynamoDBApplicationRepository(ApplicationRepository):
    """
    DynamoDB implementation of the application repository.

    Items are keyed by application ID. The application itself is stored as
    a JSON document in the ``data`` attribute so that float amounts do not
    need converting to Decimal.
    """

    def __init__(self,
                 table_name: str,
                 region: str,
                 endpoint_url: Optional[str] = None):
        """Initialize DynamoDB repository."""
        self._logger = get_logger(__name__)
        self.table_name = table_name
        self._dynamodb = boto3.resource('dynamodb', region_name=region, endpoint_url=endpoint_url)
        self.table = self._dynamodb.Table(self.table_name)
        self._ensure_table_exists()

    def _ensure_table_exists(self) -> None:
        """Ensure the DynamoDB table exists."""
        try:
            self.table.load()
        except ClientError as e:
            if e.response['Error']['Code'] == 'ResourceNotFoundException':
                self._create_table()
            else:
                raise StorageError(f"Error checking DynamoDB table: {str(e)}") from e

    def _create_table(self) -> None:
        """Create the applications table."""
        try:
            table = self._dynamodb.create_table(
                TableName=self.table_name,
                KeySchema=[
                    {'AttributeName': 'id', 'KeyType': 'HASH'},
                ],
                AttributeDefinitions=[
                    {'AttributeName': 'id', 'AttributeType': 'S'},
                ],
                BillingMode='PAY_PER_REQUEST'
            )
            table.meta.client.get_waiter('table_exists').wait(TableName=self.table_name)
            self.table = table
            self._logger.info("Created DynamoDB table", table_name=self.table_name)
        except ClientError as e:
            raise StorageError(f"Failed to create DynamoDB table: {str(e)}") from e

    def save(self, application: LoanApplication) -> None:
        """Save an application, replacing any stored copy with the same ID."""
        item = {
            'id': application.application_id,
            'data': json.dumps(application.to_dict()),
            'updated_at': datetime.now(timezone.utc).isoformat(),
        }
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to save application: {str(e)}") from e

    def find_by_id(self, application_id: str) -> Optional[LoanApplication]:
        """Find an application by ID."""
        try:
            response = self.table.get_item(Key={'id': application_id})
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to find application: {str(e)}") from e

        if 'Item' not in response:
            return None
        return LoanApplication.from_dict(json.loads(response['Item']['data']))

    def find_all(self) -> List[LoanApplication]:
        """Find all applications with a paginated scan."""
        items = []
        scan_kwargs = {}
        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                items.extend(response.get('Items', []))
                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_key
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to find applications: {str(e)}") from e

        return [LoanApplication.from_dict(json.loads(item['data'])) for item in items]
