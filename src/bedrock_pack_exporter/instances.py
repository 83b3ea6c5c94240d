_settings = None


def get_settings_instance():
    global _settings
    if _settings is None:
        from .config.settings import Settings

        _settings = Settings()
    return _settings


def reset_settings_instance():
    global _settings
    _settings = None
