import uuid
from sqlalchemy import Index, Uuid
from ..extensions import db
from ..utils import utc_now, slugify
from .base import FillableMixin


class Humanresource(FillableMixin, db.Model):
    __tablename__ = 'humanresources'

    fillable_setters = {'name': 'set_name'}

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = db.Column(Uuid, db.ForeignKey('businesses.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.Text, nullable=False)
    slug = db.Column(db.Text, nullable=False)
    capacity = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index('ix_humanresources_business_id', 'business_id'),
    )

    def set_name(self, value: str) -> 'Humanresource':
        self.name = value
        self.slug = slugify(value)
        return self


class ServiceType(FillableMixin, db.Model):
    __tablename__ = 'service_types'

    fillable_setters = {'name': 'set_name'}

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = db.Column(Uuid, db.ForeignKey('businesses.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.Text, nullable=False)
    slug = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index('ix_service_types_business_id', 'business_id'),
        db.UniqueConstraint('business_id', 'slug', name='uq_service_types_business_slug'),
    )

    def set_name(self, value: str) -> 'ServiceType':
        self.name = value
        self.slug = slugify(value)
        return self
