from fastapi import Request

from jobboard.services.pages import JobBoardPages
from jobboard.services.repository import JobBoardRepository


def get_repository(request: Request) -> JobBoardRepository:
    return request.app.state.repository


def get_pages(request: Request) -> JobBoardPages:
    return JobBoardPages(request.app.state.repository, request.app.state.settings)
