"""Pharmacy sign-off package.

Feature modules (accounts, signoffs, notifications) each carry a model,
a repository protocol with its MySQL implementation, a service layer and a
thin Flask controller.
"""
