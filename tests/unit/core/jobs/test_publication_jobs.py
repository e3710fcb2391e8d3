"""Unit tests for the post-ingestion render and notify job."""

from unittest.mock import Mock, patch
from uuid import uuid4

from django.test import override_settings

from core.exceptions import ArtefactNotFoundError
from core.jobs.publication_jobs import (
    enqueue_publication_processing,
    process_publication_job,
)
from core.services.temp_storage import temp_storage
from tests.base import BaseUnitTest
from tests.factories import (
    civil_and_family_payload,
    create_artefact,
    create_list_type,
    create_location,
    create_subscription,
    create_user,
)


class TestProcessPublicationJob(BaseUnitTest):
    """Tests for process_publication_job."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        create_list_type()
        create_location(9001, name="Oxford Combined Court Centre")
        self.artefact = create_artefact()
        temp_storage.save_json(self.artefact.artefact_id, civil_and_family_payload())

        self.notify = Mock()
        self.notify.send_email.return_value = "notify-id"
        patcher = patch(
            "core.services.notification_dispatcher.gov_notify_client", self.notify
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_unknown_artefact(self):
        """Test that a missing artefact raises."""
        with self.assertRaises(ArtefactNotFoundError):
            process_publication_job(str(uuid4()))

    def test_renders_pdf_without_subscribers(self):
        """Test the PDF is written even when nobody is notified."""
        result = process_publication_job(str(self.artefact.artefact_id))

        self.assertIsNone(result.pdf_error)
        self.assertTrue(result.pdf_path.exists())
        self.assertEqual(
            result.pdf_path, temp_storage.pdf_path(self.artefact.artefact_id)
        )
        self.assertGreater(result.size_bytes, 0)
        self.assertFalse(result.exceeds_max_size)
        self.assertEqual(result.notification_result.total_subscriptions, 0)
        self.notify.send_email.assert_not_called()

    def test_subscriber_receives_pdf(self):
        """Test that the rendered PDF is attached to subscriber emails."""
        create_subscription(create_user())

        result = process_publication_job(str(self.artefact.artefact_id))

        self.assertEqual(result.notification_result.sent, 1)
        kwargs = self.notify.send_email.call_args.kwargs
        self.assertEqual(kwargs["template_id"], "template-pdf-and-summary")
        attachment = kwargs["personalisation"]["link_to_file"]
        self.assertEqual(attachment["filename"], f"{self.artefact.artefact_id}.pdf")

    def test_skip_notifications(self):
        """Test render only processing."""
        create_subscription(create_user())

        result = process_publication_job(
            str(self.artefact.artefact_id), skip_notifications=True
        )

        self.assertIsNotNone(result.pdf_path)
        self.assertIsNone(result.notification_result)
        self.notify.send_email.assert_not_called()

    @patch("core.jobs.publication_jobs.PdfRenderer")
    def test_oversized_pdf_is_not_attached(self, mock_renderer):
        """Test that a PDF over the cap falls back to the summary template."""
        mock_renderer.return_value.render.return_value = Mock(
            pdf_path=temp_storage.pdf_path(self.artefact.artefact_id),
            size_bytes=5_000_000,
            exceeds_max_size=True,
            error=None,
            usable_attachment=False,
        )
        create_subscription(create_user())

        result = process_publication_job(str(self.artefact.artefact_id))

        self.assertTrue(result.exceeds_max_size)
        kwargs = self.notify.send_email.call_args.kwargs
        self.assertEqual(kwargs["template_id"], "template-summary-only")

    def test_list_type_without_layout(self):
        """Test that list types without a PDF layout still notify."""
        create_list_type(3, "CRIME_DAILY_LIST", "Crime Daily List", None, None)
        artefact = create_artefact(list_type_id=3)
        temp_storage.save_json(artefact.artefact_id, {"courtLists": []})
        create_subscription(create_user())

        result = process_publication_job(str(artefact.artefact_id))

        self.assertIsNone(result.pdf_path)
        self.assertEqual(result.notification_result.sent, 1)
        kwargs = self.notify.send_email.call_args.kwargs
        self.assertEqual(kwargs["template_id"], "template-subscription")

    def test_unreadable_payload(self):
        """Test that a corrupt saved payload skips rendering but still notifies."""
        temp_storage.json_path(self.artefact.artefact_id).write_text(
            '{"courtLists": [', encoding="utf-8"
        )
        create_subscription(create_user())

        result = process_publication_job(str(self.artefact.artefact_id))

        self.assertIsNone(result.pdf_path)
        self.assertFalse(temp_storage.pdf_path(self.artefact.artefact_id).exists())
        self.assertEqual(result.notification_result.sent, 1)

    @patch("core.jobs.publication_jobs.NotificationDispatcher")
    def test_dispatch_error_is_logged(self, mock_dispatcher):
        """Test that dispatcher exceptions do not escape the job."""
        mock_dispatcher.return_value.dispatch.side_effect = RuntimeError("db gone")

        with patch("core.jobs.publication_jobs.logger") as mock_logger:
            result = process_publication_job(str(self.artefact.artefact_id))

        self.assertIsNone(result.notification_result)
        mock_logger.error.assert_called_once()
        self.assertEqual(
            mock_logger.error.call_args.args[0], "notification_dispatch_failed"
        )


class TestEnqueuePublicationProcessing(BaseUnitTest):
    """Tests for enqueue_publication_processing."""

    @patch("core.jobs.publication_jobs.process_publication_job")
    def test_runs_inline_when_not_async(self, mock_job):
        """Test inline processing in test configuration."""
        artefact_id = uuid4()

        enqueue_publication_processing(artefact_id)

        mock_job.assert_called_once_with(str(artefact_id), False)

    @override_settings(PUBLICATION_PROCESSING_ASYNC=True)
    @patch("core.jobs.publication_jobs.django_rq")
    def test_enqueues_when_async(self, mock_rq):
        """Test that the job is put on the default RQ queue."""
        artefact_id = uuid4()
        queue = mock_rq.get_queue.return_value
        queue.enqueue.return_value.id = "job-1"

        enqueue_publication_processing(artefact_id, skip_notifications=True)

        mock_rq.get_queue.assert_called_once_with("default")
        queue.enqueue.assert_called_once_with(
            process_publication_job, str(artefact_id), True
        )
