"""Volunteer matching API package.

Keeps the ``volunteer_api`` package a regular package so imports never fall
back to namespace resolution.
"""
