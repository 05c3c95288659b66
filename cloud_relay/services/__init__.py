"""Relay services wrapping the OCR and image-generation providers"""
