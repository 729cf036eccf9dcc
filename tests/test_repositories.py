import pytest

from adapters.repository.asset_repository import AssetRepository, compose_image, decompose_image
from adapters.repository.company_repository import CompanyRepository
from adapters.repository.unit_repository import UnitRepository
from adapters.repository.user_repository import UserRepository
from domain.exceptions import CastError, DuplicateKeyError, ValidationError

from conftest import BASE64_IMAGE, SAMPLE


@pytest.fixture()
def companies(db_session):
    return CompanyRepository(db_session)


@pytest.fixture()
def assets(db_session):
    return AssetRepository(db_session)


def make_asset(repo, **overrides):
    document = {**SAMPLE["assets"], "serialnumber": None, **overrides}
    return repo.create(document)


class TestDocumentRepository:

    def test_create_assigns_id_and_returns_public_fields(self, companies):
        company = companies.create(SAMPLE["companies"])
        assert company == {"id": 1, **SAMPLE["companies"]}

    def test_ids_are_distinct(self, companies):
        first = companies.create(SAMPLE["companies"])
        second = companies.create({**SAMPLE["companies"], "cnpj": "11222333000181"})
        assert first["id"] != second["id"]

    def test_find_by_id(self, companies):
        created = companies.create(SAMPLE["companies"])
        assert companies.find_by_id(created["id"]) == created
        assert companies.find_by_id(str(created["id"])) == created

    def test_find_by_id_missing_returns_none(self, companies):
        assert companies.find_by_id(99) is None

    def test_find_by_id_malformed_raises_cast_error(self, companies):
        with pytest.raises(CastError):
            companies.find_by_id("not-an-id")

    def test_duplicate_unique_field(self, companies):
        companies.create(SAMPLE["companies"])
        with pytest.raises(DuplicateKeyError) as exc_info:
            companies.create({**SAMPLE["companies"], "name": "Other"})
        assert exc_info.value.field == "cnpj"
        assert str(exc_info.value) == 'Duplicate unique field: {"cnpj": "00155513000171"}'

    def test_repository_usable_after_duplicate(self, companies):
        companies.create(SAMPLE["companies"])
        with pytest.raises(DuplicateKeyError):
            companies.create(SAMPLE["companies"])
        assert companies.count_documents() == 1

    def test_find_skip_and_limit(self, db_session):
        units = UnitRepository(db_session)
        for index in range(5):
            units.create({"name": f"unit {index}", "company": 1})

        assert [unit["name"] for unit in units.find({}, skip=1, limit=2)] == ["unit 1", "unit 2"]
        assert len(units.find({}, skip=0, limit=0)) == 5

    def test_update_first_match_only(self, db_session):
        units = UnitRepository(db_session)
        units.create({"name": "a", "company": 1})
        units.create({"name": "b", "company": 1})

        updated = units.find_one_and_update({"company": 1}, {"name": "changed"})

        assert updated == {"id": 1, "name": "changed", "company": 1}
        assert units.find_by_id(2)["name"] == "b"

    def test_update_no_match_returns_none(self, companies):
        assert companies.find_one_and_update({"id": 5}, {"name": "x"}) is None

    def test_update_invalid_value(self, companies):
        company = companies.create(SAMPLE["companies"])
        with pytest.raises(ValidationError):
            companies.find_one_and_update({"id": company["id"]}, {"cnpj": "123"})

    def test_delete_returns_removed_document(self, companies):
        company = companies.create(SAMPLE["companies"])
        assert companies.find_one_and_delete({"id": company["id"]}) == company
        assert companies.find_by_id(company["id"]) is None
        assert companies.find_one_and_delete({"id": company["id"]}) is None


class TestFilters:

    @pytest.fixture(autouse=True)
    def seed(self, assets):
        make_asset(assets, name="a", healthscore=20, user=1, unit=1)
        make_asset(assets, name="b", healthscore=50, user=2, unit=1)
        make_asset(assets, name="c", healthscore=90, user=2, unit=2, status="inAlert")

    def names(self, assets, query):
        return [asset["name"] for asset in assets.find(query)]

    def test_equality(self, assets):
        assert self.names(assets, {"user": 2}) == ["b", "c"]

    def test_list_means_in(self, assets):
        assert self.names(assets, {"unit": [2, 3]}) == ["c"]

    def test_comparison_operators(self, assets):
        assert self.names(assets, {"healthscore": {"$gte": 50}}) == ["b", "c"]
        assert self.names(assets, {"healthscore": {"$gt": 20, "$lt": 90}}) == ["b"]

    def test_nin_and_ne(self, assets):
        assert self.names(assets, {"name": {"$nin": ["a", "b"]}}) == ["c"]
        assert self.names(assets, {"status": {"$ne": "inOperation"}}) == ["c"]

    def test_or(self, assets):
        assert self.names(assets, {"$or": [{"name": "a"}, {"status": "inAlert"}]}) == ["a", "c"]

    def test_id_alias(self, assets):
        assert self.names(assets, {"_id": "2"}) == ["b"]

    def test_count_matches_find(self, assets):
        query = {"unit": 1}
        assert assets.count_documents(query) == len(assets.find(query))

    def test_unknown_field(self, assets):
        with pytest.raises(ValidationError, match="Unknown filter field"):
            assets.find({"color": "red"})

    def test_unknown_operator(self, assets):
        with pytest.raises(ValidationError, match="Unsupported filter operator"):
            assets.find({"healthscore": {"$regex": "1"}})


class TestUserRepository:

    def test_password_is_never_serialized(self, db_session):
        users = UserRepository(db_session)
        user = users.create(SAMPLE["users"])
        assert "password" not in user
        assert all("password" not in found for found in users.find())

    def test_find_by_login_matches_username_or_email(self, db_session):
        users = UserRepository(db_session)
        users.create(SAMPLE["users"])
        assert users.find_by_login("teste-user").email == "user@teste.com.br"
        assert users.find_by_login("user@teste.com.br").username == "teste-user"
        assert users.find_by_login("nobody") is None

    def test_duplicate_username(self, db_session):
        users = UserRepository(db_session)
        users.create(SAMPLE["users"])
        with pytest.raises(DuplicateKeyError) as exc_info:
            users.create({**SAMPLE["users"], "email": "other@teste.com.br"})
        assert exc_info.value.field == "username"


class TestAssetImage:

    def test_image_round_trip(self, assets):
        created = make_asset(assets)
        assert created["image"] == BASE64_IMAGE
        assert assets.find_by_id(created["id"])["image"] == BASE64_IMAGE

    def test_asset_without_image(self, assets):
        created = make_asset(assets, image="")
        assert created["image"] == ""

    def test_decompose_splits_at_first_comma(self):
        image_type, image_buffer = decompose_image(BASE64_IMAGE)
        assert image_type == "data:image/png;base64"
        assert image_buffer == b"\x89PNG\r\n\x1a\n"
        assert compose_image(image_type, image_buffer) == BASE64_IMAGE

    @pytest.mark.parametrize("image", ["no-comma", ",iVBORw0KGgo=", "data:image/png;base64,@@@"])
    def test_decompose_rejects_malformed_image(self, image):
        with pytest.raises(ValidationError):
            decompose_image(image)

    def test_update_keeps_image_when_not_sent(self, assets):
        created = make_asset(assets)
        updated = assets.find_one_and_update({"id": created["id"]}, {"healthscore": 10})
        assert updated["image"] == BASE64_IMAGE
        assert updated["healthscore"] == 10


class TestAggregateHealth:

    def test_groups_by_status(self, assets):
        make_asset(assets, healthscore=40, status="inOperation")
        make_asset(assets, healthscore=60, status="inOperation")
        make_asset(assets, healthscore=50, status="inAlert")

        reports = sorted(assets.aggregate_health(), key=lambda report: report["status"])

        assert reports == [
            {"status": "inAlert", "total": 1, "averageHealth": 50.0},
            {"status": "inOperation", "total": 2, "averageHealth": 50.0},
        ]

    def test_extra_group_fields_and_filter(self, assets):
        make_asset(assets, healthscore=10, unit=1, company=1)
        make_asset(assets, healthscore=20, unit=2, company=1)
        make_asset(assets, healthscore=30, unit=2, company=1)
        make_asset(assets, healthscore=99, unit=2, company=2)

        reports = sorted(assets.aggregate_health(["unit"], {"company": 1}), key=lambda report: report["unit"])

        assert reports == [
            {"status": "inOperation", "unit": 1, "total": 1, "averageHealth": 10.0},
            {"status": "inOperation", "unit": 2, "total": 2, "averageHealth": 25.0},
        ]
        assert sum(report["total"] for report in reports) == assets.count_documents({"company": 1})

    def test_status_is_not_grouped_twice(self, assets):
        make_asset(assets)
        assert list(assets.aggregate_health(["status"])[0]) == ["status", "total", "averageHealth"]

    def test_average_is_rounded(self, assets):
        for score in (10, 10, 11):
            make_asset(assets, healthscore=score)
        assert assets.aggregate_health()[0]["averageHealth"] == 10.33

    def test_unknown_group_field(self, assets):
        with pytest.raises(ValidationError, match="Cannot group assets by image"):
            assets.aggregate_health(["image"])

    def test_no_assets(self, assets):
        assert assets.aggregate_health() == []
