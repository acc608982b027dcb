"""Everyday helpers: unit conversions, date arithmetic, mortgage interest, mileage, currency and e-mail aliases."""

__version__ = "0.2.3"