import unittest
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from backend.concierge import create_app, db
from backend.concierge.models import Booking, Business, Category, Humanresource, ServiceType, User, business_user
from backend.concierge.observability import QueryCounter
from backend.concierge.repositories import BusinessRepository, UserRepository


class TestBusinessRepository(unittest.TestCase):
    def setUp(self):
        self.app = create_app({'SQLALCHEMY_DATABASE_URI': 'sqlite://', 'TESTING': True})
        self.app_context = self.app.app_context()
        self.app_context.push()
        db.create_all()

        self.repo = BusinessRepository()
        self.user_repo = UserRepository()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.app_context.pop()

    def test_update_renaming_recomputes_slug(self):
        business = self.repo.create(name='Old Name')
        updated = self.repo.update(business.id, name='Shiny New Name')
        self.assertEqual(updated.slug, 'shiny-new-name')

    def test_update_normalizes_empty_phone_and_address(self):
        business = self.repo.create(name='Biz', phone='555', postal_address='Somewhere')
        updated = self.repo.update(business.id, phone='', postal_address='')
        self.assertIsNone(updated.phone)
        self.assertIsNone(updated.postal_address)

    def test_update_skips_unknown_keys(self):
        business = self.repo.create(name='Biz')
        updated = self.repo.update(business.id, description='Updated', bogus='ignored')
        self.assertEqual(updated.description, 'Updated')

    def test_update_unknown_business_returns_none(self):
        self.assertIsNone(self.repo.update(uuid.uuid4(), name='Nope'))

    def test_slug_is_not_unique(self):
        first = self.repo.create(name='Twin Biz')
        second = self.repo.create(name='Twin Biz')
        self.assertEqual(first.slug, second.slug)
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(self.repo.get_by_slug('twin-biz').id, first.id)

    def test_get_by_slug_missing(self):
        self.assertIsNone(self.repo.get_by_slug('missing'))

    def test_deactivate_and_activate(self):
        business = self.repo.create(name='Toggle')
        self.assertTrue(self.repo.deactivate(business.id))
        self.assertEqual(self.repo.get_active_businesses(), [])

        self.assertTrue(self.repo.activate(business.id))
        self.assertEqual([b.id for b in self.repo.get_active_businesses()], [business.id])

        self.assertFalse(self.repo.deactivate(uuid.uuid4()))

    def test_add_owner_twice_keeps_single_entry(self):
        business = self.repo.create(name='Biz')
        owner = self.user_repo.create(name='Owner', email='owner@example.com')

        self.repo.add_owner(business, owner)
        self.repo.add_owner(business, owner)

        self.assertEqual(len(self.repo.owners(business)), 1)

    def test_remove_owner(self):
        business = self.repo.create(name='Biz')
        owner = self.user_repo.create(name='Owner', email='owner@example.com')
        self.repo.add_owner(business, owner)

        self.repo.remove_owner(business, owner)

        self.assertEqual(self.repo.owners(business), set())
        self.assertIsNone(self.repo.owner(business))

    def test_user_businesses(self):
        owner = self.user_repo.create(name='Owner', email='owner@example.com')
        for name in ['Zeta Spa', 'Alpha Garage']:
            self.repo.add_owner(self.repo.create(name=name), owner)

        names = [b.name for b in self.user_repo.get_businesses(owner)]
        self.assertEqual(names, ['Alpha Garage', 'Zeta Spa'])

    def test_relations_are_scoped_to_business(self):
        mine = self.repo.create(name='Mine')
        other = self.repo.create(name='Other')
        other.humanresources.append(Humanresource(name='Not Mine'))
        other.service_types.append(ServiceType(name='Not Mine Either'))
        db.session.add(Booking(business_id=other.id, start_at=datetime(2026, 1, 1, tzinfo=timezone.utc)))
        self.repo.commit()

        self.assertEqual(self.repo.humanresources(mine), [])
        self.assertEqual(self.repo.service_types(mine), [])
        self.assertEqual(self.repo.bookings(mine), [])
        self.assertEqual(len(self.repo.humanresources(other)), 1)

    def test_bookings_are_ordered_by_start(self):
        business = self.repo.create(name='Biz')
        later = datetime(2026, 5, 2, 10, 0, tzinfo=timezone.utc)
        earlier = datetime(2026, 5, 1, 10, 0, tzinfo=timezone.utc)
        db.session.add_all([
            Booking(business_id=business.id, start_at=later, comments='later'),
            Booking(business_id=business.id, start_at=earlier, comments='earlier'),
        ])
        db.session.commit()

        self.assertEqual([b.comments for b in self.repo.bookings(business)], ['earlier', 'later'])

    def test_get_all_with_filters(self):
        self.repo.create(name='Open Biz')
        closed = self.repo.create(name='Closed Biz')
        self.repo.deactivate(closed.id)

        self.assertEqual(len(self.repo.get_all()), 2)
        self.assertEqual([b.name for b in self.repo.get_all({'is_active': False})], ['Closed Biz'])

    def test_exists(self):
        business = self.repo.create(name='Biz')
        self.assertTrue(self.repo.exists(business.id))
        self.assertFalse(self.repo.exists(uuid.uuid4()))

    def test_delete_cascades_to_children_and_owner_links(self):
        business = self.repo.create(name='Doomed Biz')
        owner = self.user_repo.create(name='Owner', email='owner@example.com')
        self.repo.add_owner(business, owner)
        business.humanresources.append(Humanresource(name='Chair'))
        business.service_types.append(ServiceType(name='Cut'))
        self.repo.commit()
        db.session.add(Booking(business_id=business.id, start_at=datetime(2026, 1, 1, tzinfo=timezone.utc)))
        db.session.commit()
        business_id = business.id

        self.assertTrue(self.repo.delete(business_id))

        self.assertFalse(self.repo.exists(business_id))
        self.assertEqual(db.session.query(Humanresource).count(), 0)
        self.assertEqual(db.session.query(ServiceType).count(), 0)
        self.assertEqual(db.session.query(Booking).count(), 0)
        self.assertEqual(db.session.query(business_user).count(), 0)
        # owners outlive the business
        self.assertIsNotNone(self.user_repo.get_by_email('owner@example.com'))

    def test_delete_unknown_business_returns_false(self):
        self.assertFalse(self.repo.delete(uuid.uuid4()))

    def test_rollback_discards_pending_changes(self):
        business = self.repo.create(name='Original')
        business.set_name('Pending Rename')

        self.repo.rollback()

        self.assertEqual(business.name, 'Original')
        self.assertEqual(self.repo.get_by_slug('original').id, business.id)
        self.assertIsNone(self.repo.get_by_slug('pending-rename'))

    def test_failed_create_rolls_back_and_reraises(self):
        self.user_repo.create(name='Owner', email='owner@example.com')

        with self.assertRaises(IntegrityError):
            self.user_repo.create(name='Duplicate', email='owner@example.com')

        # session stays usable after the rollback
        self.assertEqual(len(self.user_repo.get_all()), 1)

    def test_get_paginated_filters_active(self):
        for i in range(3):
            self.repo.create(name=f"Biz {i}")
        inactive = self.repo.create(name='Closed Biz')
        self.repo.deactivate(inactive.id)

        result = self.repo.get_paginated(page=1, per_page=2, filters={'is_active': True})
        self.assertEqual(result['total'], 3)
        self.assertEqual(result['pages'], 2)
        self.assertEqual(len(result['items']), 2)


class TestBusinessQueryBudget(unittest.TestCase):
    EAGER_LOAD_QUERY_BUDGET = 6

    def setUp(self):
        self.app = create_app({'SQLALCHEMY_DATABASE_URI': 'sqlite://', 'TESTING': True})
        self.app_context = self.app.app_context()
        self.app_context.push()
        db.create_all()

        self.repo = BusinessRepository()

        category = Category(slug='doctor', name='Doctor')
        db.session.add(category)
        self.business = Business(name='Budget Clinic', category=category)
        for i in range(3):
            self.business.owners.add(User(name=f"Owner {i}", email=f"owner{i}@example.com"))
            self.business.humanresources.append(Humanresource(name=f"Doctor {i}"))
            self.business.service_types.append(ServiceType(name=f"Service {i}"))
        db.session.add(self.business)
        db.session.flush()

        for i in range(5):
            db.session.add(Booking(
                business_id=self.business.id,
                start_at=datetime(2026, 2, 1 + i, 9, 0, tzinfo=timezone.utc),
            ))
        db.session.commit()
        self.business_id = self.business.id
        db.session.expunge_all()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.app_context.pop()

    def test_get_with_relations_stays_within_budget(self):
        with QueryCounter(db.engine) as counter:
            business = self.repo.get_with_relations(self.business_id)
            loaded = (
                len(business.owners),
                len(business.humanresources),
                len(business.service_types),
                len(business.bookings),
                business.category.slug,
            )

        self.assertEqual(loaded, (3, 3, 3, 5, 'doctor'))
        self.assertLessEqual(counter.count, self.EAGER_LOAD_QUERY_BUDGET, '\n\n'.join(counter.statements))

    def test_get_with_relations_missing_business(self):
        self.assertIsNone(self.repo.get_with_relations(uuid.uuid4()))


if __name__ == '__main__':
    unittest.main()
