"""
AWS boundary modules.

Exports: SecretsClient, SessionTable, StudentTable, UploadBucket, FunctionInvoker
"""

from .dynamodb_client import SessionTable, StudentTable
from .lambda_client import FunctionInvoker
from .s3_client import UploadBucket
from .secrets_client import SecretsClient

__all__ = ["FunctionInvoker", "SecretsClient", "SessionTable", "StudentTable", "UploadBucket"]
