"""Integration tests for full user flows through the controller.

No stubs: the controller drives a real RemoteGateway, which talks to the
fake API over ASGITransport.
"""

import pytest_check as check

from src.gateway.client import RemoteGateway
from src.models.schemas import Role
from src.state.controller import InteractionController
from src.state.view import UploadModalState
from tests.fake_api import FakeBackend


class TestConversationFlow:
    async def test_select_existing_chat(
        self, gateway: RemoteGateway, backend: FakeBackend
    ) -> None:
        chat_id = backend.add_chat("A", [{"role": "user", "content": "hi"}])
        controller = InteractionController(gateway)
        await controller.start()

        assert await controller.select_chat(chat_id)

        check.equal(controller.session.chat_id, chat_id)
        check.equal([m.content for m in controller.session.messages], ["hi"])

    async def test_create_then_send(self, gateway: RemoteGateway, backend: FakeBackend) -> None:
        """New chat becomes active, then a send round-trips to the new transcript."""
        backend.add_chat("Earlier")
        controller = InteractionController(gateway)
        await controller.start()
        controller.open_title_modal()
        controller.set_title_draft("Q3 Report")
        backend.requests.clear()

        assert await controller.create_chat()

        check.equal(backend.requests, ["POST /api/v1/chat/new", "GET /api/v1/chat/list"])
        check.equal(controller.directory.chats[0].title, "Q3 Report")
        new_id = controller.session.chat_id
        check.equal(new_id, controller.directory.chats[0].id)
        check.is_false(controller.view.title_modal_open)

        backend.requests.clear()
        controller.set_message_draft("find files for Project Alpha")
        assert await controller.send_message()

        check.equal(
            backend.requests,
            ["POST /api/v1/chat/send-messages", f"GET /api/v1/chat/{new_id}/history"],
        )
        check.equal(
            [(m.role, m.content) for m in controller.session.messages],
            [
                (Role.USER, "find files for Project Alpha"),
                (Role.ASSISTANT, "No files matched 'find files for Project Alpha'."),
            ],
        )
        check.is_false(controller.view.is_sending)

    async def test_delete_active_chat(self, gateway: RemoteGateway, backend: FakeBackend) -> None:
        keep = backend.add_chat("Keep")
        drop = backend.add_chat("Drop")
        controller = InteractionController(gateway)
        await controller.start()
        await controller.select_chat(drop)

        assert await controller.delete_chat(drop)

        check.is_true(controller.session.is_welcome)
        check.equal(controller.session.messages, ())
        check.equal([c.id for c in controller.directory], [keep])

    async def test_delete_twice_is_idempotent(
        self, gateway: RemoteGateway, backend: FakeBackend
    ) -> None:
        chat_id = backend.add_chat("Once")
        controller = InteractionController(gateway)

        check.is_true(await controller.delete_chat(chat_id))
        check.is_true(await controller.delete_chat(chat_id))
        check.equal(len(controller.directory), 0)

    async def test_send_to_deleted_chat_leaves_session(
        self, gateway: RemoteGateway, backend: FakeBackend
    ) -> None:
        chat_id = backend.add_chat("A", [{"role": "user", "content": "hi"}])
        controller = InteractionController(gateway)
        await controller.select_chat(chat_id)
        del backend.chats[chat_id]

        check.is_false(await controller.send_message("anyone there?"))
        check.equal([m.content for m in controller.session.messages], ["hi"])
        check.is_false(controller.view.is_sending)


class TestUploadFlow:
    async def test_upload_pdf_refreshes_file_index(
        self, gateway: RemoteGateway, backend: FakeBackend, pdf_bytes: bytes
    ) -> None:
        controller = InteractionController(gateway)
        await controller.start()
        check.equal(len(controller.files), 0)

        controller.open_upload_modal()
        assert controller.stage_upload("q3-report.pdf", pdf_bytes, "application/pdf")
        result = await controller.submit_upload()

        check.is_true(result.success)
        check.equal([f.key for f in controller.files.files], ["q3-report.pdf"])
        check.equal(controller.files.files[0].size, len(pdf_bytes))
        check.equal(controller.view.upload_state, UploadModalState.CLOSED)
        check.is_none(controller.view.pending_upload)

    async def test_server_rejection_keeps_modal_open(
        self, gateway: RemoteGateway, backend: FakeBackend
    ) -> None:
        backend.max_upload_size = 1024
        controller = InteractionController(gateway)
        controller.open_upload_modal()
        controller.stage_upload("scan.pdf", b"%PDF-1.4" + b"0" * 2048, "application/pdf")

        result = await controller.submit_upload()

        check.is_false(result.success)
        check.equal(result.http_status, 413)
        check.equal(controller.view.upload_state, UploadModalState.OPEN)
        check.equal(controller.view.pending_upload.error_message, "File exceeds 1024 bytes")
        check.is_true(controller.can_submit_upload())
        check.equal(backend.files, [])
