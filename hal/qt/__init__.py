"""Optional PyQt6 surfaces for the HAL application."""
