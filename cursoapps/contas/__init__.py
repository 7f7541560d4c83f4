"""Checking and savings accounts with their holders."""