"""Concurrent price fetching with a running average."""