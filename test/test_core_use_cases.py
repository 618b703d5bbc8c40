import unittest
from unittest.mock import Mock

from bson import ObjectId

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.exceptions import (
    InvalidTaskIdError,
    InvalidTaskStatusError,
    MissingTaskFieldsError,
)
from core.domain.models.task import TaskStatus
from fakes import InMemoryTaskRepository


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _create(self, **overrides: str):
        data = {"title": "Write docs", "description": "API usage", "status": "pending"}
        data.update(overrides)
        return CreateTaskUseCase(self.repo).execute(CreateTaskCommand(**data))

    def test_create_task_assigns_id_and_equal_timestamps(self) -> None:
        task = self._create(status="in-progress")

        self.assertTrue(ObjectId.is_valid(task.id))
        self.assertEqual(task.status, TaskStatus.IN_PROGRESS)
        self.assertEqual(task.created_at, task.updated_at)
        self.assertEqual(self.repo.find_by_id(task.id), task)

    def test_create_task_missing_field_does_not_persist(self) -> None:
        for missing in ("title", "description", "status"):
            with self.subTest(missing=missing):
                with self.assertRaises(MissingTaskFieldsError):
                    self._create(**{missing: ""})

        self.assertEqual(len(self.repo), 0)

    def test_create_task_invalid_status_does_not_persist(self) -> None:
        with self.assertRaises(InvalidTaskStatusError) as ctx:
            self._create(status="done")

        self.assertEqual(str(ctx.exception), "done is incorrect status type")
        self.assertEqual(len(self.repo), 0)

    def test_list_tasks_returns_all(self) -> None:
        first = self._create(title="one")
        second = self._create(title="two")

        tasks = ListTasksUseCase(self.repo).execute()

        self.assertEqual([t.id for t in tasks], [first.id, second.id])

    def test_get_task_invalid_id_raises(self) -> None:
        with self.assertRaises(InvalidTaskIdError):
            GetTaskUseCase(self.repo).execute("not-an-id")

    def test_get_task_unknown_id_returns_none(self) -> None:
        self.assertIsNone(GetTaskUseCase(self.repo).execute(str(ObjectId())))

    def test_update_task_replaces_fields(self) -> None:
        task = self._create()

        updated = UpdateTaskUseCase(self.repo).execute(
            task.id,
            UpdateTaskCommand(title="New", description="Changed", status="completed"),
        )

        self.assertIsNotNone(updated)
        self.assertEqual(updated.id, task.id)
        self.assertEqual(updated.title, "New")
        self.assertEqual(updated.description, "Changed")
        self.assertEqual(updated.status, TaskStatus.COMPLETED)
        self.assertEqual(updated.created_at, task.created_at)
        self.assertGreaterEqual(updated.updated_at, task.updated_at)

    def test_update_task_is_full_replace(self) -> None:
        task = self._create()

        with self.assertRaises(MissingTaskFieldsError):
            UpdateTaskUseCase(self.repo).execute(task.id, UpdateTaskCommand(title="Only"))

        self.assertEqual(self.repo.find_by_id(task.id).title, "Write docs")

    def test_update_task_validates_fields_before_id(self) -> None:
        repo = Mock()
        use_case = UpdateTaskUseCase(repo)

        with self.assertRaises(MissingTaskFieldsError):
            use_case.execute("bad", UpdateTaskCommand())

        repo.is_valid_id.assert_not_called()
        repo.replace.assert_not_called()

    def test_update_task_invalid_id_skips_store(self) -> None:
        repo = Mock()
        repo.is_valid_id.return_value = False

        with self.assertRaises(InvalidTaskIdError):
            UpdateTaskUseCase(repo).execute(
                "bad", UpdateTaskCommand(title="t", description="d", status="pending")
            )

        repo.replace.assert_not_called()

    def test_update_task_unknown_id_returns_none(self) -> None:
        result = UpdateTaskUseCase(self.repo).execute(
            str(ObjectId()),
            UpdateTaskCommand(title="t", description="d", status="pending"),
        )

        self.assertIsNone(result)

    def test_delete_task_returns_removed_then_none(self) -> None:
        task = self._create()
        use_case = DeleteTaskUseCase(self.repo)

        self.assertEqual(use_case.execute(task.id), task)
        self.assertIsNone(use_case.execute(task.id))

    def test_delete_task_invalid_id_raises(self) -> None:
        with self.assertRaises(InvalidTaskIdError):
            DeleteTaskUseCase(self.repo).execute("123")


if __name__ == "__main__":
    unittest.main()
