"""Validation and sanitization steps of the feedback pipeline"""
