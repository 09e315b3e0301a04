"""Secure feedback form service"""
