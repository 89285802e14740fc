"""
GamePulse - prediction de score pour le football universitaire
"""
__version__ = "0.1.0"
