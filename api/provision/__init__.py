"""
Connector provisioning endpoint.
"""
