import pytest

from career_advisor.core.errors import Conflict, InvalidCredentials
from career_advisor.schemas.schemas import SignupRequest


def _signup_request(**overrides) -> SignupRequest:
    data = {"email": "a@x.com", "password": "secret1", "firstName": "Ann", "lastName": "Lee"}
    data.update(overrides)
    return SignupRequest(**data)


def test_signup_issues_token_for_new_account(authenticator, tokens):
    token, user = authenticator.signup(_signup_request(age="16", school="Central High"))

    assert tokens.verify(token) == user.id
    assert user.email == "a@x.com"
    assert user.full_name == "Ann Lee"
    assert user.age == 16
    assert "password" not in user.model_dump(by_alias=True)


def test_signup_stores_hash_not_plaintext(authenticator, store, hasher):
    authenticator.signup(_signup_request())

    stored = store.find_by_email("a@x.com", include_secret=True)
    assert stored["password"] != "secret1"
    assert hasher.verify("secret1", stored["password"])


def test_signup_duplicate_email_conflicts(authenticator, users_collection):
    authenticator.signup(_signup_request())

    with pytest.raises(Conflict) as exc:
        authenticator.signup(_signup_request(email="A@X.com", firstName="Other"))

    assert exc.value.message == "User with this email already exists"
    assert users_collection.count_documents({}) == 1


def test_signup_keeps_profile_defaults(authenticator, store):
    _, user = authenticator.signup(_signup_request())

    stored = store.find_by_id(user.id)
    assert stored["interests"] == []
    assert stored["universityApplications"] == []
    assert stored["applicationProgress"]["averageCompletion"] == 0


def test_login_returns_full_profile(authenticator, tokens):
    _, created = authenticator.signup(_signup_request(
        interests=[{"name": "Chess club", "category": "Gaming"}],
        universityApplications=[{"universityName": "MIT", "program": "EECS", "deadline": "2027-01-01T00:00:00"}],
    ))

    token, user = authenticator.login("A@x.com", "secret1")

    assert tokens.verify(token) == created.id
    assert user.interests[0].category == "Gaming"
    assert user.university_applications[0].status == "Not Started"
    assert "password" not in user.model_dump(by_alias=True)


def test_login_failures_are_indistinguishable(authenticator):
    authenticator.signup(_signup_request())

    with pytest.raises(InvalidCredentials) as wrong_password:
        authenticator.login("a@x.com", "wrong")
    with pytest.raises(InvalidCredentials) as unknown_email:
        authenticator.login("nobody@x.com", "secret1")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert wrong_password.value.status_code == unknown_email.value.status_code == 400
