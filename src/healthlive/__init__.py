"""healthlive — derive daily wellness scores from Health Auto Export data."""

__version__ = "0.1.0"
