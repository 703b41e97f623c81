"""terragrade: security grading for Terraform lock file providers."""

__version__ = "2.0.0"
