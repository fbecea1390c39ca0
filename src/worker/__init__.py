"""Command line workers for the invoice dashboard"""
from .user_provisioner import UserProvisionerWorker

__all__ = ["UserProvisionerWorker"]
