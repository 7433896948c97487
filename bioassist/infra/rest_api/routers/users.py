from fastapi import APIRouter, Depends

from ..dependencies import get_register_user_usecase, get_get_user_usecase
from ..schemas import ApiResponse, CreateUserRequest, UserResponse
from ....port.dto.user_dto import CreateUserDTO
from ....usecase.user_management.register_user import RegisterUserUseCase
from ....usecase.user_management.get_user import GetUserUseCase

router = APIRouter(
    prefix="/api/users",
    tags=["users"]
)


@router.post("", response_model=ApiResponse[UserResponse])
def create_user(
    req: CreateUserRequest,
    usecase: RegisterUserUseCase = Depends(get_register_user_usecase)
):
    """
    新規ユーザー登録
    """
    dto = CreateUserDTO(openid=req.openid, nickname=req.nickname, avatar=req.avatar)
    user = usecase.execute(dto)
    return ApiResponse[UserResponse].ok(UserResponse.from_entity(user), "用户创建成功")


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(
    user_id: str,
    usecase: GetUserUseCase = Depends(get_get_user_usecase)
):
    """
    ユーザー情報取得（存在しなければ404）
    """
    user = usecase.execute(user_id)
    return ApiResponse[UserResponse].ok(UserResponse.from_entity(user), "获取用户信息成功")
