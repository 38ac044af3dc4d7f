import unittest
from types import SimpleNamespace
from urllib.parse import parse_qs, urlparse

from backend.concierge.models import Business
from backend.concierge.presenters import (
    BusinessPresenter,
    present,
    resolve_presenter_type,
)


def make_business(**overrides):
    attrs = {
        'id': None,
        'name': 'Sample Business',
        'slug': 'sample-business',
        'description': None,
        'phone': None,
        'postal_address': None,
        'social_facebook': None,
        'category': None,
    }
    attrs.update(overrides)
    return SimpleNamespace(**attrs)


class TestPresenterLookup(unittest.TestCase):
    def test_same_presenter_for_every_business(self):
        first = Business(name='First')
        second = Business(name='Second', phone='555')
        self.assertIs(resolve_presenter_type(first), BusinessPresenter)
        self.assertIs(resolve_presenter_type(second), resolve_presenter_type(first))

    def test_present_wraps_entity(self):
        business = Business(name='Wrapped')
        presenter = present(business)
        self.assertIsInstance(presenter, BusinessPresenter)
        self.assertIs(presenter.business, business)

    def test_unregistered_type_raises_lookup_error(self):
        with self.assertRaises(LookupError):
            resolve_presenter_type(object())


class TestBusinessPresenter(unittest.TestCase):
    def test_display_phone_falls_back_to_dash(self):
        self.assertEqual(BusinessPresenter(make_business()).display_phone, '-')
        self.assertEqual(BusinessPresenter(make_business(phone='555-0100')).display_phone, '555-0100')

    def test_facebook_url(self):
        self.assertIsNone(BusinessPresenter(make_business()).facebook_url)
        self.assertEqual(
            BusinessPresenter(make_business(social_facebook='awesomebiz')).facebook_url,
            'https://www.facebook.com/awesomebiz',
        )
        self.assertEqual(
            BusinessPresenter(make_business(social_facebook='https://fb.me/biz')).facebook_url,
            'https://fb.me/biz',
        )

    def test_industry_icon(self):
        self.assertEqual(BusinessPresenter(make_business()).industry_icon, '/img/industries/default.png')
        business = make_business(category=SimpleNamespace(slug='doctor'))
        self.assertEqual(BusinessPresenter(business).industry_icon, '/img/industries/doctor.png')

    def test_static_map_url(self):
        self.assertIsNone(BusinessPresenter(make_business()).static_map_url())

        url = BusinessPresenter(make_business(postal_address='1 Main St, Springfield')).static_map_url(zoom=12)
        query = parse_qs(urlparse(url).query)
        self.assertTrue(url.startswith('https://maps.googleapis.com/maps/api/staticmap?'))
        self.assertEqual(query['center'], ['1 Main St, Springfield'])
        self.assertEqual(query['zoom'], ['12'])
        self.assertEqual(query['size'], ['180x100'])

    def test_to_dict_does_not_mutate(self):
        business = make_business(phone=None)
        data = BusinessPresenter(business).to_dict()
        self.assertEqual(data['slug'], 'sample-business')
        self.assertEqual(data['phone'], '-')
        self.assertIsNone(data['id'])
        self.assertIsNone(business.phone)


if __name__ == '__main__':
    unittest.main()
