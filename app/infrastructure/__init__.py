"""Infrastructure modules for the country lookup service.

Centralized infrastructure components:
- configuration: Settings management (Settings, MaxMindSettings, CacheSettings)
- logging: Structured logging setup and request context
- operations: Tagged operation results (OperationResult, OperationStatus)
- clients: MaxMind database and Redis clients
- services: Dependency injection providers (SettingsDep, LookupServiceDep, get_settings)
"""
