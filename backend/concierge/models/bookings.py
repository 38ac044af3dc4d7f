import uuid
from sqlalchemy import Index, Uuid
from ..extensions import db
from ..utils import utc_now


class Booking(db.Model):
    __tablename__ = 'bookings'

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    business_id = db.Column(Uuid, db.ForeignKey('businesses.id', ondelete='CASCADE'), nullable=False)
    humanresource_id = db.Column(
        Uuid,
        db.ForeignKey('humanresources.id', ondelete='SET NULL'),
        nullable=True
    )
    service_type_id = db.Column(
        Uuid,
        db.ForeignKey('service_types.id', ondelete='SET NULL'),
        nullable=True
    )
    start_at = db.Column(db.DateTime(timezone=True), nullable=False)
    finish_at = db.Column(db.DateTime(timezone=True), nullable=True)
    status = db.Column(
        db.Enum(
            'reserved',
            'confirmed',
            'annulated',
            'served',
            name='booking_status_enum'
        ),
        nullable=False,
        default='reserved'
    )
    comments = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    humanresource = db.relationship('Humanresource')
    service_type = db.relationship('ServiceType')

    __table_args__ = (
        Index('ix_bookings_business_id', 'business_id'),
        Index('ix_bookings_business_start', 'business_id', 'start_at'),
    )
