from .const import app_name_title, package_name, get_installed_version

__all__ = ["app_name_title", "package_name", "get_installed_version"]
