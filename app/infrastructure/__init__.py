"""Infrastructure modules for the bodax notify service.

Centralized infrastructure components:
- configuration: Settings management (Settings, DiscordSettings, StripeSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- notifications: Notification composition, dispatch and result aggregation
- operations: Operation results and error classification
- services: Dependency injection services (SettingsDep, get_settings)
"""
