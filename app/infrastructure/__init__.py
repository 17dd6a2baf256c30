"""Infrastructure modules for the strings catalog tooling.

Centralized infrastructure components:
- configuration: Settings management (settings, StringsSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results for best-effort work (OperationResult)
- services: Application-scoped providers (get_settings)
"""
