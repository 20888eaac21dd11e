"""Utility helpers for cgp_pkg."""
