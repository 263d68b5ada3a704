"""
AWS resource configuration.

Region, DynamoDB table names, upload bucket and function names. Field
names map onto the environment variables the Lambda functions are
deployed with.

Dependencies: pydantic_settings
System role: AWS resource configuration for boundary clients
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    """Settings for AWS resources used by the Lambda functions."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    region: str = Field(
        default="us-west-2",
        validation_alias=AliasChoices("AWS_REGION", "region"),
        description="AWS region for all service clients",
    )
    sessions_table: str = Field(
        default="",
        validation_alias=AliasChoices("TUTORING_SESSIONS_TABLE", "sessions_table"),
        description="DynamoDB table holding tutoring sessions",
    )
    students_table: str = Field(
        default="",
        validation_alias=AliasChoices("STUDENTS_TABLE", "students_table"),
        description="DynamoDB table holding registered students",
    )
    upload_bucket: str = Field(
        default="",
        validation_alias=AliasChoices("UPLOAD_BUCKET_NAME", "upload_bucket"),
        description="S3 bucket for uploaded study material",
    )
    document_processing_function: str = Field(
        default="",
        validation_alias=AliasChoices(
            "DOCUMENT_PROCESSING_FUNCTION_NAME", "document_processing_function"
        ),
        description="Lambda function invoked after an upload",
    )
