"""Infrastructure modules for the iam-idc application.

Centralized infrastructure components:
- configuration: Settings management (Settings, get_settings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and AWS error classification
- clients.aws: boto3-backed Identity Store and SSO Admin clients
"""
