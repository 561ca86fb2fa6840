"""Test suite for uadetect."""
