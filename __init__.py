"""rm for CP/M style drives."""
