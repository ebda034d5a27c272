"""Unit tests for the owner and property image command handlers.

- CreateOwnerHandler
- UpdateOwnerPhotoHandler
- AddPropertyImagesHandler
- DeletePropertyImageHandler
"""

from datetime import date, timedelta
from itertools import count

import pytest

from src.application.commands.handlers.add_property_images_handler import (
    AddPropertyImagesHandler,
)
from src.application.commands.handlers.create_owner_handler import CreateOwnerHandler
from src.application.commands.handlers.delete_property_image_handler import (
    DeletePropertyImageHandler,
)
from src.application.commands.handlers.update_owner_photo_handler import (
    UpdateOwnerPhotoHandler,
)
from src.application.commands.owner_commands import CreateOwner, UpdateOwnerPhoto
from src.application.commands.property_commands import (
    AddPropertyImages,
    DeletePropertyImage,
)
from src.application.errors import ApplicationErrorCode
from src.application.services.cache_invalidation import (
    OwnersListTag,
    OwnerTag,
    PropertiesListTag,
    PropertyTag,
)
from src.application.services.transactions import NO_RETRY
from src.core.result import Failure, Success
from src.domain.entities.property_image import PropertyImage
from src.domain.errors import OwnerError
from src.domain.value_objects.image_data import MAX_IMAGE_BYTES, MAX_PHOTO_BYTES, ImageUpload
from tests.conftest import make_owner, make_property

PNG = ImageUpload(filename="front.png", content_type="image/png", content=b"\x89PNG")


def _build(handler_class, mock_uow, mock_invalidator, mock_logger):
    return handler_class(
        uow=mock_uow,
        retry_policy=NO_RETRY,
        cache_invalidator=mock_invalidator,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestCreateOwnerHandler:
    @pytest.fixture
    def handler(self, mock_uow, mock_invalidator, mock_logger):
        return _build(CreateOwnerHandler, mock_uow, mock_invalidator, mock_logger)

    @pytest.mark.asyncio
    async def test_creates_owner_and_invalidates(self, handler, mock_uow, mock_invalidator):
        mock_uow.owners.add.return_value = make_owner(owner_id=5, name="Ana Gomez")

        result = await handler.handle(
            CreateOwner(name="  Ana Gomez ", address="Calle 1", birthday=date(1980, 5, 17))
        )

        assert isinstance(result, Success)
        assert result.value.id == 5
        assert result.value.properties == []
        assert mock_uow.owners.add.await_args.args[0].name == "Ana Gomez"
        mock_uow.owners.exists.assert_not_awaited()
        mock_uow.commit.assert_awaited_once()
        mock_invalidator.invalidate.assert_awaited_once_with(OwnerTag(5), OwnersListTag())

    @pytest.mark.asyncio
    async def test_taken_explicit_id_is_conflict(self, handler, mock_uow, mock_invalidator):
        mock_uow.owners.exists.return_value = True

        result = await handler.handle(
            CreateOwner(
                name="Ana Gomez", address="Calle 1", birthday=date(1980, 5, 17), owner_id=42
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        mock_uow.owners.add.assert_not_awaited()
        mock_uow.rollback.assert_awaited_once()
        mock_invalidator.invalidate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_future_birthday_is_rejected(self, handler, mock_uow):
        result = await handler.handle(
            CreateOwner(
                name="Ana Gomez",
                address="Calle 1",
                birthday=date.today() + timedelta(days=2),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details["field"] == "birthday"
        mock_uow.owners.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_photo_must_be_image_data_uri(self, handler, mock_uow):
        result = await handler.handle(
            CreateOwner(
                name="Ana Gomez",
                address="Calle 1",
                birthday=date(1980, 5, 17),
                photo="https://example.com/me.png",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.details["field"] == "photo"
        mock_uow.owners.add.assert_not_awaited()


@pytest.mark.unit
class TestUpdateOwnerPhotoHandler:
    @pytest.fixture
    def handler(self, mock_uow, mock_invalidator, mock_logger):
        return _build(UpdateOwnerPhotoHandler, mock_uow, mock_invalidator, mock_logger)

    @pytest.mark.asyncio
    async def test_stores_data_uri_and_invalidates_owned_properties(
        self, handler, mock_uow, mock_invalidator
    ):
        owner = make_owner(owner_id=1)
        mock_uow.owners.find_by_id.return_value = owner
        mock_uow.properties.list_by_owner_ids.return_value = [
            make_property(property_id=10, owner_id=1)
        ]

        result = await handler.handle(UpdateOwnerPhoto(owner_id=1, upload=PNG))

        assert isinstance(result, Success)
        assert result.value.photo == "data:image/png;base64,iVBORw=="
        mock_uow.owners.update.assert_awaited_once_with(owner)
        mock_invalidator.invalidate.assert_awaited_once_with(
            OwnerTag(1), OwnersListTag(), PropertyTag(10)
        )

    @pytest.mark.asyncio
    async def test_unknown_owner_is_not_found(self, handler, mock_uow, mock_invalidator):
        mock_uow.owners.find_by_id.return_value = None

        result = await handler.handle(UpdateOwnerPhoto(owner_id=9, upload=PNG))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        mock_invalidator.invalidate.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("upload", "message"),
        [
            (
                ImageUpload(filename="notes.txt", content_type="text/plain", content=b"hi"),
                OwnerError.UNSUPPORTED_PHOTO_TYPE,
            ),
            (
                ImageUpload(
                    filename="big.png",
                    content_type="image/png",
                    content=b"\x00" * (MAX_PHOTO_BYTES + 1),
                ),
                OwnerError.PHOTO_TOO_LARGE,
            ),
        ],
    )
    async def test_rejected_uploads_never_touch_the_database(
        self, handler, mock_uow, upload, message
    ):
        result = await handler.handle(UpdateOwnerPhoto(owner_id=1, upload=upload))

        assert isinstance(result, Failure)
        assert result.error.message == message
        assert result.error.details["field"] == "file"
        mock_uow.owners.find_by_id.assert_not_awaited()


@pytest.mark.unit
class TestAddPropertyImagesHandler:
    @pytest.fixture
    def handler(self, mock_uow, mock_invalidator, mock_logger):
        return _build(AddPropertyImagesHandler, mock_uow, mock_invalidator, mock_logger)

    @pytest.fixture
    def stored_images(self, mock_uow):
        ids = count(1)

        def assign_id(image: PropertyImage) -> PropertyImage:
            image.id = next(ids)
            return image

        mock_uow.images.add.side_effect = assign_id
        return mock_uow.images.add

    @pytest.mark.asyncio
    async def test_valid_uploads_are_stored_and_others_skipped(
        self, handler, mock_uow, mock_invalidator, stored_images
    ):
        mock_uow.properties.find_by_id.return_value = make_property(property_id=10, owner_id=1)
        uploads = [
            PNG,
            ImageUpload(filename="back.JPG", content_type="", content=b"\xff\xd8"),
            ImageUpload(filename="plan.pdf", content_type="application/pdf", content=b"%PDF"),
        ]

        result = await handler.handle(AddPropertyImages(property_id=10, uploads=uploads))

        assert isinstance(result, Success)
        assert result.value.image_ids == [1, 2]
        assert result.value.skipped == 1
        stored = [call.args[0] for call in stored_images.await_args_list]
        assert stored[1].file.startswith("data:image/jpeg;base64,")
        mock_invalidator.invalidate.assert_awaited_once_with(
            PropertyTag(10), OwnerTag(1), PropertiesListTag()
        )

    @pytest.mark.asyncio
    async def test_oversized_image_is_skipped(self, handler, mock_uow, stored_images):
        mock_uow.properties.find_by_id.return_value = make_property(property_id=10, owner_id=1)
        oversized = ImageUpload(
            filename="aerial.png",
            content_type="image/png",
            content=b"\x00" * (MAX_IMAGE_BYTES + 1),
        )

        result = await handler.handle(
            AddPropertyImages(property_id=10, uploads=[oversized, PNG])
        )

        assert isinstance(result, Success)
        assert result.value.image_ids == [1]
        assert result.value.skipped == 1
        stored_images.assert_awaited_once()
        assert stored_images.await_args.args[0].file.startswith("data:image/png;base64,iVBOR")

    @pytest.mark.asyncio
    async def test_all_uploads_skipped_is_validation_failure(
        self, handler, mock_uow, stored_images
    ):
        mock_uow.properties.find_by_id.return_value = make_property()
        empty = ImageUpload(filename="empty.png", content_type="image/png", content=b"")

        result = await handler.handle(AddPropertyImages(property_id=10, uploads=[empty]))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details["field"] == "images"
        stored_images.assert_not_awaited()
        mock_uow.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_property_is_not_found(self, handler, mock_uow):
        mock_uow.properties.find_by_id.return_value = None

        result = await handler.handle(AddPropertyImages(property_id=99, uploads=[PNG]))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestDeletePropertyImageHandler:
    @pytest.fixture
    def handler(self, mock_uow, mock_invalidator, mock_logger):
        return _build(DeletePropertyImageHandler, mock_uow, mock_invalidator, mock_logger)

    @pytest.mark.asyncio
    async def test_disables_image_and_invalidates(self, handler, mock_uow, mock_invalidator):
        image = PropertyImage(id=3, property_id=10, file="data:image/png;base64,AA==")
        image.mark_loaded()
        mock_uow.images.find_by_id.return_value = image
        mock_uow.properties.find_by_id.return_value = make_property(property_id=10, owner_id=1)

        result = await handler.handle(DeletePropertyImage(image_id=3))

        assert result == Success(value=None)
        assert image.enabled is False
        mock_uow.images.update.assert_awaited_once_with(image)
        mock_invalidator.invalidate.assert_awaited_once_with(
            PropertyTag(10), OwnerTag(1), PropertiesListTag()
        )

    @pytest.mark.asyncio
    async def test_already_disabled_image_is_not_found(
        self, handler, mock_uow, mock_invalidator
    ):
        mock_uow.images.find_by_id.return_value = PropertyImage(
            id=3, property_id=10, file="data:image/png;base64,AA==", enabled=False
        )

        result = await handler.handle(DeletePropertyImage(image_id=3))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        mock_uow.images.update.assert_not_awaited()
        mock_invalidator.invalidate.assert_not_awaited()
