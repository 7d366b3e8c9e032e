"""Backup service: manual backups and scheduled backup jobs."""

from __future__ import annotations

from typing import Any

from .base import Service


class BackupService(Service):
    name = "backup"

    async def trigger_manual(self) -> Any:
        """Run an incremental backup to the configured location."""
        return await self._post("trigger_manual")

    async def trigger_manual_foundation(self) -> Any:
        """Run a full ("foundation") backup, replacing what is at the target."""
        return await self._post("trigger_manual_foundation")

    async def list_jobs(self) -> list[dict[str, Any]]:
        result = await self._get("jobs")
        if isinstance(result, dict):
            result = result.get("jobList", [])
        return result if isinstance(result, list) else []

    async def get_job(self, job_id: int | str) -> dict[str, Any] | None:
        for job in await self.list_jobs():
            if str(job.get("id")) == str(job_id):
                return job
        return None

    async def set_job(self, job: dict[str, Any]) -> Any:
        """Create or update a scheduled job (PUT to the jobs resource)."""
        return await self._put("jobs", job)

    async def delete_job(self, job_id: int | str) -> Any:
        return await self._delete("job", id=job_id)
