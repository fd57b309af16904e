"""Pydantic models describing promotion/coupon specs and cart snapshots."""
