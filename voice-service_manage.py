import uvicorn
from app import create_app
from app.config.config import Config

app = create_app()

if __name__ == '__main__':
    uvicorn.run(
        app,
        host=Config.HOST,
        port=Config.PORT,
        log_config=None # logging.basicConfig를 사용하므로 Uvicorn의 기본 로깅 설정을 비활성화
    )
