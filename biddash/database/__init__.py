"""Credential persistence"""
