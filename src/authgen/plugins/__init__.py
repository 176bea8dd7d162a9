"""Built-in generator plugins, one sub-package per profile type."""
