"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, RenderingSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- storage: Content stores for templates, locale files and assets
- i18n: Locale negotiation, translation and formatting
- rendering: Template lookup, partials and fingerprinted asset paths
- services: Dependency injection services (SettingsDep, TranslatorDep, get_settings)
"""
