"""Core domain: settings, models, repositories, pagination."""
