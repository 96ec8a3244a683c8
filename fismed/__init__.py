"""HTTP back end serving customers, warehouses, price lists, purchase orders and payables/receivables."""

__version__ = "0.1.0"