from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_biography_service
from ..schemas import (
    ApiResponse, BiographyResponse, CreateBiographyRequest, UpdateBiographyRequest
)
from ....port.dto.biography_dto import CreateBiographyDTO, UpdateBiographyDTO
from ....usecase.biography_management.biography_service import BiographyService

router = APIRouter(prefix="/api/biographies", tags=["biographies"])


@router.post("", response_model=ApiResponse[BiographyResponse])
def create_biography(
    request: CreateBiographyRequest,
    service: BiographyService = Depends(get_biography_service)
):
    """伝記プロジェクトを作成（user_idが存在しなければ400）"""
    biography = service.create_biography(
        CreateBiographyDTO(
            user_id=request.user_id,
            title=request.title,
            description=request.description,
        )
    )
    return ApiResponse[BiographyResponse].ok(BiographyResponse.from_entity(biography), "传记项目创建成功")


@router.get("", response_model=ApiResponse[List[BiographyResponse]])
def list_biographies(
    user_id: Optional[str] = Query(default=None),
    service: BiographyService = Depends(get_biography_service)
):
    """ユーザーの伝記プロジェクト一覧を取得"""
    biographies = service.list_biographies(user_id)
    items = [BiographyResponse.from_entity(b) for b in biographies]
    return ApiResponse[List[BiographyResponse]].ok(items, "获取传记项目列表成功")


@router.get("/{biography_id}", response_model=ApiResponse[BiographyResponse])
def get_biography(
    biography_id: str,
    service: BiographyService = Depends(get_biography_service)
):
    """特定の伝記プロジェクトを取得"""
    biography = service.get_biography(biography_id)
    return ApiResponse[BiographyResponse].ok(BiographyResponse.from_entity(biography), "获取传记项目成功")


@router.post("/{biography_id}", response_model=ApiResponse[BiographyResponse])
def update_biography(
    biography_id: str,
    request: UpdateBiographyRequest,
    service: BiographyService = Depends(get_biography_service)
):
    """伝記プロジェクトを部分更新"""
    dto = UpdateBiographyDTO(
        title=request.title,
        description=request.description,
        content=request.content,
        fields_set=request.provided_fields(),
    )
    biography = service.update_biography(biography_id, dto)
    return ApiResponse[BiographyResponse].ok(BiographyResponse.from_entity(biography), "传记项目更新成功")
