# flake8: noqa
"""Azure Alerts Management Service Resource Provider 2021-08-08"""
from .models import *
from .operations import *
from .client import *
