from dataclasses import dataclass

from fastapi import Request

from docgenius.config.settings import Settings
from docgenius.processing.cache import ResultCache
from docgenius.processing.intake import UploadIntake
from docgenius.storage.base import BaseRecordStore


@dataclass(frozen=True)
class Services:
    """Components shared by request handlers for the lifetime of the app."""

    settings: Settings
    store: BaseRecordStore
    cache: ResultCache
    intake: UploadIntake


def get_services(request: Request) -> Services:
    return request.app.state.services
