"""Éditeur d'écrans TFT générant du code TFT_eSPI."""

__version__ = "0.1.0"
