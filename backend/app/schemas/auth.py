from pydantic import BaseModel, EmailStr

# 토큰 발급 요청
class TokenRequest(BaseModel):
    email: EmailStr
