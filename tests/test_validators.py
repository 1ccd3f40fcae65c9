import unittest
from mailindex.utils.config import UserProfile
from mailindex.utils.validators import check_profile, looks_like_email


class TestValidators(unittest.TestCase):

    def test_email_shape(self):
        self.assertTrue(looks_like_email("test@example.com"))
        self.assertTrue(looks_like_email("user.name+tag@sub.domain.co.uk"))
        self.assertFalse(looks_like_email(""))
        self.assertFalse(looks_like_email("invalid-email"))
        self.assertFalse(looks_like_email("user@"))
        self.assertFalse(looks_like_email("@domain.com"))
        self.assertFalse(looks_like_email("user@domain"))  # Missing TLD
        self.assertFalse(looks_like_email("user..name@domain.com"))  # Consecutive dots
        self.assertFalse(looks_like_email("user name@domain.com"))

    def test_clean_profile(self):
        profile = UserProfile(
            full_name="Ada",
            primary_email="ada@example.com",
            other_emails=("a@example.com",),
            database_path="/srv/mail",
        )
        self.assertEqual(check_profile(profile), [])

    def test_empty_primary_email_not_reported(self):
        self.assertEqual(check_profile(UserProfile()), [])

    def test_bad_addresses_reported(self):
        profile = UserProfile(
            primary_email="ada",
            other_emails=("a@example.com", "not-an-address"),
        )
        warnings = check_profile(profile)
        self.assertEqual(len(warnings), 2)
        self.assertIn("Primary email does not look like an address: ada", warnings)
        self.assertIn("Additional email does not look like an address: not-an-address", warnings)


if __name__ == '__main__':
    unittest.main()
