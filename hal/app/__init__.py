"""HAL application screens, handlers and composition root."""
