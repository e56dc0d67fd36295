from datetime import datetime
from unittest.mock import Mock

import pytest

from gradepredicate.activity import ActivityService
from gradepredicate.records import (
    Activity,
    CreateActivityRequest,
    NotFoundError,
    UpdateActivityRequest,
)

NOW = datetime(2023, 1, 1, 12, 0, 0)


@pytest.fixture
def repo():
    return Mock()


@pytest.fixture
def service(repo):
    return ActivityService(repo)


def _models(user_ids=(1, 2)):
    return [
        Activity(id=i + 1, user_id=uid, organization=f"Organization Name {i + 1}",
                 year=2023, created_at=NOW, updated_at=NOW)
        for i, uid in enumerate(user_ids)
    ]


def test_create_activity_success(service, repo):
    req = CreateActivityRequest(user_id=1, organization="Organization Name", year=2023)

    def assign_id(model):
        model.id = 1

    repo.create_activity.side_effect = assign_id
    response = service.create_activity(req)

    assert response.id == 1
    assert response.user_id == req.user_id
    assert response.organization == req.organization
    assert response.year == req.year
    assert response.created_at == response.updated_at


def test_create_activity_repository_error(service, repo):
    repo.create_activity.side_effect = RuntimeError("database error")
    with pytest.raises(RuntimeError, match="^database error$"):
        service.create_activity(CreateActivityRequest(user_id=1))


def test_get_activity_by_id_success(service, repo):
    model = Activity(id=1, user_id=1, organization="Organization Name", year=2023,
                     created_at=NOW, updated_at=NOW)
    repo.get_activity_by_id.return_value = model

    response = service.get_activity_by_id(1)

    repo.get_activity_by_id.assert_called_once_with(1)
    assert response.id == model.id
    assert response.user_id == model.user_id
    assert response.organization == model.organization
    assert response.year == model.year
    assert response.created_at == model.created_at
    assert response.updated_at == model.updated_at


def test_get_activity_by_id_not_found(service, repo):
    repo.get_activity_by_id.return_value = None
    with pytest.raises(NotFoundError, match="^activity not found$"):
        service.get_activity_by_id(999)


def test_get_activity_by_id_repository_error(service, repo):
    repo.get_activity_by_id.side_effect = RuntimeError("database error")
    with pytest.raises(RuntimeError, match="^database error$"):
        service.get_activity_by_id(1)


def test_get_activities_by_user_id_success(service, repo):
    models = _models(user_ids=(1, 1))
    repo.get_activities_by_user_id.return_value = models

    response = service.get_activities_by_user_id(1)

    assert len(response) == 2
    for model, resp in zip(models, response):
        assert resp.id == model.id
        assert resp.user_id == model.user_id
        assert resp.organization == model.organization
        assert resp.year == model.year


def test_get_activities_by_user_id_empty(service, repo):
    repo.get_activities_by_user_id.return_value = None
    assert service.get_activities_by_user_id(999) == []


def test_get_activities_by_user_id_repository_error(service, repo):
    repo.get_activities_by_user_id.side_effect = RuntimeError("database error")
    with pytest.raises(RuntimeError, match="^database error$"):
        service.get_activities_by_user_id(1)


def test_get_all_activities_success(service, repo):
    repo.get_all_activities.return_value = _models()

    response = service.get_all_activities()

    assert [r.id for r in response] == [1, 2]
    assert [r.user_id for r in response] == [1, 2]
    assert [r.organization for r in response] == [
        "Organization Name 1", "Organization Name 2",
    ]
    assert [r.year for r in response] == [2023, 2023]


def test_get_all_activities_repository_error(service, repo):
    repo.get_all_activities.side_effect = RuntimeError("database error")
    with pytest.raises(RuntimeError, match="^database error$"):
        service.get_all_activities()


def test_update_activity_success(service, repo):
    req = UpdateActivityRequest(organization="Updated Organization", year=2024)
    model = Activity(id=1, user_id=1, organization="Organization Name", year=2023,
                     created_at=NOW, updated_at=NOW)
    repo.get_activity_by_id.return_value = model
    saved = []
    repo.update_activity.side_effect = lambda m: saved.append(
        (m.organization, m.year, m.updated_at)
    )

    response = service.update_activity(1, req)

    assert len(saved) == 1
    organization, year, updated_at = saved[0]
    assert (organization, year) == ("Updated Organization", 2024)
    assert updated_at > NOW

    assert response.id == 1
    assert response.user_id == 1
    assert response.organization == req.organization
    assert response.year == req.year
    assert response.created_at == NOW
    assert response.updated_at > NOW


def test_update_activity_not_found(service, repo):
    repo.get_activity_by_id.return_value = None
    with pytest.raises(NotFoundError, match="^activity not found$"):
        service.update_activity(999, UpdateActivityRequest())
    repo.update_activity.assert_not_called()


def test_update_activity_repository_error(service, repo):
    repo.get_activity_by_id.return_value = Activity(id=1)
    repo.update_activity.side_effect = RuntimeError("database error")
    with pytest.raises(RuntimeError, match="^database error$"):
        service.update_activity(1, UpdateActivityRequest())


def test_delete_activity_success(service, repo):
    repo.delete_activity.return_value = None
    assert service.delete_activity(1) is None
    repo.delete_activity.assert_called_once_with(1)


def test_delete_activity_repository_error(service, repo):
    repo.delete_activity.side_effect = RuntimeError("database error")
    with pytest.raises(RuntimeError, match="^database error$"):
        service.delete_activity(1)