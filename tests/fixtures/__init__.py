"""Canned AWS responses for tests"""
