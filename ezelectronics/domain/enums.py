# ezelectronics/domain/enums.py
from enum import Enum


class Role(str, Enum):
    CUSTOMER = "Customer"
    MANAGER = "Manager"
    ADMIN = "Admin"


class Category(str, Enum):
    SMARTPHONE = "Smartphone"
    LAPTOP = "Laptop"
    APPLIANCE = "Appliance"


class Grouping(str, Enum):
    CATEGORY = "category"
    MODEL = "model"
