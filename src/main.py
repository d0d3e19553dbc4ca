from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.staticfiles import StaticFiles

from src.infra.database.repository.maria_engine import init_schema, dispose_engine
from src.router.admin import admin_controller
from src.router.users import auth_controller, user_controller, category_controller, report_controller, \
    comment_controller, notification_controller, file_controller
from src.utils.exception_handler.http_log_handler import setup_exception_handlers
from src.utils.path import path_dic


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 시작 시 테이블 생성 + 기본 상태값
    await init_schema()

    yield

    # 종료 시 커넥션 정리
    await dispose_engine()


app = FastAPI(lifespan=lifespan)
setup_exception_handlers(app)

app.include_router(auth_controller.router)
app.include_router(user_controller.router)
app.include_router(admin_controller.router)
app.include_router(category_controller.router)
app.include_router(report_controller.router)
app.include_router(comment_controller.router)
app.include_router(notification_controller.router)
app.include_router(file_controller.router)

# 업로드 이미지
app.mount("/public/uploads", StaticFiles(directory=path_dic["uploads"], check_dir=False), name="uploads")


app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "*"
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8080)
