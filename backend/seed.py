import os
from dotenv import load_dotenv
from concierge import create_app
from concierge.extensions import db
from concierge.models import Humanresource, ServiceType
from concierge.repositories import BusinessRepository, CategoryRepository, UserRepository

load_dotenv()


DEFAULT_CATEGORIES = [
    {'slug': 'doctor', 'name': 'Doctor', 'description': 'Medical practices and clinics'},
    {'slug': 'garage', 'name': 'Garage', 'description': 'Car repair and maintenance'},
    {'slug': 'salon', 'name': 'Salon', 'description': 'Hair and beauty salons'},
    {'slug': 'yoga', 'name': 'Yoga', 'description': 'Yoga and fitness studios'},
]


def seed_categories():
    """Seed the default categories that don't exist yet."""
    category_repo = CategoryRepository()

    missing = [c for c in DEFAULT_CATEGORIES if not category_repo.get_by_slug(c['slug'])]
    if not missing:
        print("Default categories already exist.")
        return

    print(f"Creating {len(missing)} categories...")
    try:
        category_repo.create_many(missing)
        print("Categories created successfully.")
    except Exception as e:
        print(f"Failed to create categories: {e}")


def seed_owner():
    """Seed the demo owner if it doesn't exist."""
    user_repo = UserRepository()

    email = os.environ.get('OWNER_EMAIL', 'owner@example.com')

    existing_user = user_repo.get_by_email(email)
    if existing_user:
        print(f"Owner {email} already exists.")
        return existing_user

    print(f"Creating owner {email}...")
    try:
        user = user_repo.create(name='Demo Owner', email=email, is_active=True)
        print("Owner created successfully.")
        return user
    except Exception as e:
        print(f"Failed to create owner: {e}")
        return None


def seed_business(owner):
    """Seed the demo business with a humanresource and a service type."""
    business_repo = BusinessRepository()

    existing_business = business_repo.get_by_slug('my-awesome-biz')
    if existing_business:
        print("Demo business 'My Awesome Biz' already exists.")
        return existing_business

    print("Creating demo business 'My Awesome Biz'...")
    try:
        business = business_repo.create(
            name='My Awesome Biz',
            description='A demo business',
            phone='',
            postal_address='1 Main Street, Springfield',
            category=CategoryRepository().get_by_slug('salon'),
        )
        business_repo.add_owner(business, owner)

        business.humanresources.append(Humanresource(name='Front Desk', capacity=2))
        business.service_types.append(ServiceType(name='Haircut', description='Wash and cut'))
        business_repo.commit()
        print("Demo business created successfully.")
        return business
    except Exception as e:
        print(f"Failed to create demo business: {e}")
        return None


def seed_all():
    app = create_app()
    with app.app_context():
        db.create_all()

        seed_categories()

        owner = seed_owner()
        if not owner:
            print("Cannot seed a business without an owner.")
            return

        seed_business(owner)

        print("\nSeed complete!")


if __name__ == "__main__":
    seed_all()
