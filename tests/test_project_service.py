import asyncio

import pytest

from repositories import ProjectRepository
from services import ProjectService


@pytest.fixture
def project_service(database):
    return ProjectService(ProjectRepository(database))


async def _create_project(service, **fields):
    data = {"title": "Launch"}
    data.update(fields)
    return (await service.create(data, "u1")).data


class TestTeamMembership:
    @pytest.mark.asyncio
    async def test_add_then_add_again(self, project_service):
        project_id = await _create_project(project_service)

        first = await project_service.add_team_member(project_id, "u2")
        second = await project_service.add_team_member(project_id, "u2")

        assert first.success is True
        assert first.data == project_id
        assert second.success is False
        assert second.status == 400
        assert second.error == "ALREADY_MEMBER"
        assert "User is already a team member" in second.message

        project = (await project_service.get_by_id(project_id)).data
        assert project["teamMembers"] == ["u2"]

    @pytest.mark.asyncio
    async def test_remove_non_member(self, project_service):
        project_id = await _create_project(project_service)

        result = await project_service.remove_team_member(project_id, "u9")

        assert result.status == 400
        assert result.error == "NOT_A_MEMBER"
        assert "User is not a team member" in result.message

    @pytest.mark.asyncio
    async def test_remove_member(self, project_service):
        project_id = await _create_project(project_service, teamMembers=["u2", "u3"])

        result = await project_service.remove_team_member(project_id, "u2")

        assert result.success is True
        project = (await project_service.get_by_id(project_id)).data
        assert project["teamMembers"] == ["u3"]

    @pytest.mark.asyncio
    async def test_membership_change_refreshes_updated_at(self, project_service):
        project_id = await _create_project(project_service)
        before = (await project_service.get_by_id(project_id)).data

        await project_service.add_team_member(project_id, "u2")

        after = (await project_service.get_by_id(project_id)).data
        assert after["updatedAt"] > before["updatedAt"]
        assert after["createdAt"] == before["createdAt"]

    @pytest.mark.asyncio
    async def test_unknown_project(self, project_service):
        added = await project_service.add_team_member("nope", "u2")
        removed = await project_service.remove_team_member("nope", "u2")

        assert added.status == 404
        assert removed.status == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "project_id, user_id, error",
        [
            ("", "u2", "MISSING_PARAMETER"),
            ("p1", None, "MISSING_PARAMETER"),
            ("p1", 7, "VALIDATION_FAILURE"),
        ],
    )
    async def test_ids_are_checked(self, project_service, project_id, user_id, error):
        result = await project_service.add_team_member(project_id, user_id)

        assert result.status == 400
        assert result.error == error

    @pytest.mark.asyncio
    async def test_concurrent_adds_keep_one_entry(self, project_service):
        project_id = await _create_project(project_service)

        results = await asyncio.gather(
            *(project_service.add_team_member(project_id, "u2") for _ in range(5))
        )

        assert sum(result.success for result in results) == 1
        project = (await project_service.get_by_id(project_id)).data
        assert project["teamMembers"] == ["u2"]

    @pytest.mark.asyncio
    async def test_concurrent_adds_of_different_users_are_all_kept(self, project_service):
        project_id = await _create_project(project_service)

        await asyncio.gather(
            *(project_service.add_team_member(project_id, f"u{i}") for i in range(2, 6))
        )

        project = (await project_service.get_by_id(project_id)).data
        assert sorted(project["teamMembers"]) == ["u2", "u3", "u4", "u5"]


class TestProjectLookups:
    @pytest.mark.asyncio
    async def test_by_creator_and_member(self, project_service):
        mine = await _create_project(project_service, teamMembers=["u2"])
        await project_service.add_team_member(mine, "u3")

        by_user = await project_service.get_projects_by_user("u1")
        by_member = await project_service.get_projects_by_member("u3")
        by_other = await project_service.get_projects_by_member("u9")

        assert [p["id"] for p in by_user.data] == [mine]
        assert [p["id"] for p in by_member.data] == [mine]
        assert by_other.success is True
        assert by_other.data == []

    @pytest.mark.asyncio
    async def test_empty_list_is_success(self, project_service):
        result = await project_service.list_all()

        assert result.success is True
        assert result.data == []

    @pytest.mark.asyncio
    async def test_description_may_be_empty(self, project_service):
        created = await project_service.create({"title": "P", "description": ""}, "u1")

        assert created.success is True
