"""
Business API Endpoints

Provides CRUD operations for businesses plus read access to their owners,
humanresources, service types, bookings and category.
"""
import uuid
import logging
from flask import Blueprint, request
from ..repositories.business_repository import BusinessRepository
from ..repositories.category_repository import CategoryRepository
from ..repositories.user_repository import UserRepository
from ..presenters import present
from .utils import api_response, model_to_dict, models_to_list

logger = logging.getLogger(__name__)

businesses_bp = Blueprint('businesses', __name__, url_prefix='/api/businesses')
repo = BusinessRepository()
user_repo = UserRepository()
category_repo = CategoryRepository()

BUSINESS_FIELDS = {
    'name',
    'description',
    'timezone',
    'strategy',
    'phone',
    'postal_address',
    'social_facebook',
}

BUSINESS_STRATEGIES = ('timeslot', 'dateslot')


def _invalid_text_field(data):
    """Name of the first editable field (or category) holding a non-string value, or None."""
    for key in sorted(BUSINESS_FIELDS | {'category'}):
        value = data.get(key)
        if key in data and value is not None and not isinstance(value, str):
            return key
    return None


def _validate_payload(data, require_name):
    """Returns an error response for a malformed body, or None."""
    if not isinstance(data, dict) or not data:
        return api_response(status_code=400, message="No data provided", error="Bad Request")

    field = _invalid_text_field(data)
    if field:
        return api_response(status_code=400, message=f"{field} must be a string", error="Bad Request")

    if (require_name or 'name' in data) and not data.get('name'):
        return api_response(status_code=400, message="Name is required", error="Bad Request")

    if 'strategy' in data and data['strategy'] not in BUSINESS_STRATEGIES:
        return api_response(status_code=400, message=f"strategy must be one of: {', '.join(BUSINESS_STRATEGIES)}", error="Bad Request")
    return None


def _business_attributes(data):
    """Pick editable fields and resolve the category slug. Returns (attrs, error_response)."""
    attrs = {key: value for key, value in data.items() if key in BUSINESS_FIELDS}
    if 'category' in data:
        category_slug = data.get('category')
        if category_slug:
            category = category_repo.get_by_slug(category_slug)
            if not category:
                return None, api_response(status_code=404, message="Category not found", error="Not Found")
            attrs['category'] = category
        else:
            attrs['category'] = None
    return attrs, None


@businesses_bp.route('', methods=['GET'])
def get_businesses():
    """Get businesses, paginated and optionally filtered by active status."""
    only_active = request.args.get('active', 'false').lower() == 'true'
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 20, type=int)
    if page < 1 or per_page < 1:
        return api_response(status_code=400, message="page and per_page must be positive", error="Bad Request")

    filters = {'is_active': True} if only_active else None
    result = repo.get_paginated(page=page, per_page=per_page, filters=filters)

    meta = {key: result[key] for key in ('total', 'page', 'per_page', 'pages')}
    return api_response(data=models_to_list(result['items']), meta=meta)


@businesses_bp.route('', methods=['POST'])
def create_business():
    """Create a new business. The slug is derived from the name."""
    data = request.get_json(silent=True)
    invalid = _validate_payload(data, require_name=True)
    if invalid:
        return invalid

    try:
        attrs, error = _business_attributes(data)
        if error:
            return error

        business = repo.create(**attrs)
        logger.info("Created business %s (%s)", business.id, business.slug)
        return api_response(data=model_to_dict(business), message="Business created successfully", status_code=201)
    except Exception as e:
        logger.exception("Failed to create business")
        return api_response(status_code=500, message="Failed to create business", error=str(e))


@businesses_bp.route('/<uuid:business_id>', methods=['GET'])
def get_business(business_id):
    """Get a specific business by ID."""
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=model_to_dict(business))


@businesses_bp.route('/slug/<slug>', methods=['GET'])
def get_business_by_slug(slug):
    """Get a business by its slug."""
    business = repo.get_by_slug(slug)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=model_to_dict(business))


@businesses_bp.route('/<uuid:business_id>', methods=['PUT'])
def update_business(business_id):
    """Update a business. Renaming recomputes the slug."""
    data = request.get_json(silent=True)
    invalid = _validate_payload(data, require_name=False)
    if invalid:
        return invalid

    try:
        attrs, error = _business_attributes(data)
        if error:
            return error

        updated_business = repo.update(business_id, **attrs)
        if not updated_business:
            return api_response(status_code=404, message="Business not found", error="Not Found")

        return api_response(data=model_to_dict(updated_business), message="Business updated successfully")
    except Exception as e:
        logger.exception(f"Failed to update business {business_id}")
        return api_response(status_code=500, message="Failed to update business", error=str(e))


@businesses_bp.route('/<uuid:business_id>', methods=['DELETE'])
def delete_business(business_id):
    """Deactivate (soft delete) a business."""
    try:
        success = repo.deactivate(business_id)
        if not success:
            return api_response(status_code=404, message="Business not found", error="Not Found")

        return api_response(message="Business deactivated successfully")
    except Exception as e:
        logger.exception(f"Failed to deactivate business {business_id}")
        return api_response(status_code=500, message="Failed to deactivate business", error=str(e))


@businesses_bp.route('/<uuid:business_id>/activate', methods=['POST'])
def activate_business(business_id):
    """Activate a business."""
    try:
        success = repo.activate(business_id)
        if not success:
            return api_response(status_code=404, message="Business not found", error="Not Found")

        return api_response(message="Business activated successfully")
    except Exception as e:
        logger.exception(f"Failed to activate business {business_id}")
        return api_response(status_code=500, message="Failed to activate business", error=str(e))


@businesses_bp.route('/<uuid:business_id>/profile', methods=['GET'])
def get_business_profile(business_id):
    """Get the business formatted by its presenter."""
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=present(business).to_dict())


@businesses_bp.route('/<uuid:business_id>/owners', methods=['GET'])
def get_business_owners(business_id):
    """Get the owners of a business. The main owner is flagged."""
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    main_owner = repo.owner(business)
    data = []
    for user in sorted(repo.owners(business), key=lambda u: u.name):
        user_dict = model_to_dict(user)
        user_dict['is_main_owner'] = main_owner is not None and user.id == main_owner.id
        data.append(user_dict)

    return api_response(data=data)


@businesses_bp.route('/<uuid:business_id>/owners', methods=['POST'])
def add_business_owner(business_id):
    """Add an existing user as owner of a business."""
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data.get('user_id'):
        return api_response(status_code=400, message="user_id is required", error="Bad Request")

    try:
        user_id = uuid.UUID(str(data['user_id']))
    except ValueError:
        return api_response(status_code=400, message="Invalid user_id format", error="Bad Request")

    user = user_repo.get_by_id(user_id)
    if not user:
        return api_response(status_code=404, message="User not found", error="Not Found")

    try:
        repo.add_owner(business, user)
        return api_response(data=model_to_dict(user), message="Owner added successfully", status_code=201)
    except Exception as e:
        logger.exception(f"Failed to add owner {user_id} to business {business_id}")
        return api_response(status_code=500, message="Failed to add owner", error=str(e))


@businesses_bp.route('/<uuid:business_id>/humanresources', methods=['GET'])
def get_business_humanresources(business_id):
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=models_to_list(repo.humanresources(business)))


@businesses_bp.route('/<uuid:business_id>/service-types', methods=['GET'])
def get_business_service_types(business_id):
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=models_to_list(repo.service_types(business)))


@businesses_bp.route('/<uuid:business_id>/bookings', methods=['GET'])
def get_business_bookings(business_id):
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=models_to_list(repo.bookings(business)))


@businesses_bp.route('/<uuid:business_id>/category', methods=['GET'])
def get_business_category(business_id):
    business = repo.get_by_id(business_id)
    if not business:
        return api_response(status_code=404, message="Business not found", error="Not Found")

    return api_response(data=model_to_dict(repo.category(business)))
