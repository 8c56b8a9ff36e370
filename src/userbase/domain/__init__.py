"""Domain layer shared by the userbase packages."""
