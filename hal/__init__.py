"""HAL 9000 reference application built on screenwire."""
