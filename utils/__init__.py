"""Utilities for Projects"""
