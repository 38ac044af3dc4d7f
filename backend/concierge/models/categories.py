import uuid
from sqlalchemy import Uuid
from ..extensions import db


class Category(db.Model):
    __tablename__ = 'categories'

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    slug = db.Column(db.Text, unique=True, nullable=False)  # e.g. doctor, garage, yoga
    name = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)
