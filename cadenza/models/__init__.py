"""Models package - Re-exports all models for convenient importing."""
from cadenza.extensions import db
from cadenza.models.user import User
from cadenza.models.company import Company
from cadenza.models.person import Person
from cadenza.models.blog import Blog

__all__ = ['db', 'User', 'Company', 'Person', 'Blog']
