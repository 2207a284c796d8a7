"""Infrastructure modules for the whitelist messages application.

Centralized infrastructure components:
- configuration: Settings management (Settings, MessagesSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale message bundles (MessageService, BundleLoader, MessageResolver)
- services: Application-scoped providers (get_settings, get_message_service)
"""
