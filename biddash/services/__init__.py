"""Dashboard services"""
