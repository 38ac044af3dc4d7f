import uuid
from sqlalchemy import Index, Uuid
from ..extensions import db
from ..utils import utc_now, slugify, nullable_text
from .base import FillableMixin


business_user = db.Table(
    'business_user',
    db.Column('business_id', Uuid, db.ForeignKey('businesses.id', ondelete='CASCADE'), primary_key=True),
    db.Column('user_id', Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    db.Column('created_at', db.DateTime(timezone=True), default=utc_now),
)


class Business(FillableMixin, db.Model):
    __tablename__ = 'businesses'

    fillable_setters = {
        'name': 'set_name',
        'phone': 'set_phone',
        'postal_address': 'set_postal_address',
    }

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    category_id = db.Column(Uuid, db.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True)
    name = db.Column(db.Text, nullable=False)
    slug = db.Column(db.Text, nullable=False)  # derived from name, not unique
    description = db.Column(db.Text, nullable=True)
    timezone = db.Column(db.Text, nullable=False, default='UTC')
    strategy = db.Column(db.Enum('timeslot', 'dateslot', name='business_strategy_enum'), nullable=False, default='timeslot')
    phone = db.Column(db.Text, nullable=True)
    postal_address = db.Column(db.Text, nullable=True)
    social_facebook = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    # Relationships
    owners = db.relationship(
        'User',
        secondary=business_user,
        collection_class=set,
        backref=db.backref('businesses', lazy='dynamic'),
    )
    category = db.relationship('Category', backref=db.backref('businesses', lazy='dynamic'))
    humanresources = db.relationship('Humanresource', backref='business', cascade='all, delete-orphan')
    service_types = db.relationship('ServiceType', backref='business', cascade='all, delete-orphan')
    bookings = db.relationship('Booking', backref='business', cascade='all, delete-orphan')

    __table_args__ = (
        Index('ix_businesses_slug', 'slug'),
        Index('ix_businesses_category_id', 'category_id'),
    )

    def set_name(self, value: str) -> 'Business':
        self.name = value
        self.slug = slugify(value)
        return self

    def set_phone(self, value) -> 'Business':
        self.phone = nullable_text(value)
        return self

    def set_postal_address(self, value) -> 'Business':
        self.postal_address = nullable_text(value)
        return self

    def get_presenter_class(self):
        from ..presenters import resolve_presenter_type
        return resolve_presenter_type(self)

    def __repr__(self):
        return f"<Business {self.slug}>"
