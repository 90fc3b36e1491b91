"""Storage configuration schema."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class JsonStorageConfig(BaseModel):
    """JSON file storage configuration."""

    file_path: str = Field("data/applications.json", description="Application database file")


class DynamoDBStorageConfig(BaseModel):
    """DynamoDB storage configuration."""

    region: str = Field("us-east-1", description="AWS region")
    table_name: str = Field("loan_applications", description="Table holding applications")
    endpoint_url: Optional[str] = Field(None, description="Custom endpoint, e.g. DynamoDB Local")


class StorageConfig(BaseModel):
    """Storage configuration."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["memory", "json", "dynamodb"] = Field(
        "memory", description="Repository implementation"
    )
    json_storage: JsonStorageConfig = Field(default_factory=JsonStorageConfig, alias="json")
    dynamodb: DynamoDBStorageConfig = Field(default_factory=DynamoDBStorageConfig)
