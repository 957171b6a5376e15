from fastapi import HTTPException, status

BEARER_HEADERS = {"WWW-Authenticate": "Bearer"}


class BadRequestException(HTTPException):
    def __init__(self, detail: str = "Data tidak lengkap atau format salah."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Data tidak ditemukan."):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InternalServerErrorException(HTTPException):
    def __init__(self, detail: str = "Terjadi kesalahan pada server."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class UnauthorizedException(HTTPException):
    def __init__(self, detail: str = "Akses ditolak."):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers=BEARER_HEADERS,
        )


class InvalidCredentialsException(UnauthorizedException):
    def __init__(self):
        super().__init__("Username atau Password salah")


class MissingAuthHeaderException(UnauthorizedException):
    def __init__(self):
        super().__init__("Akses Ditolak. Header Authorization tidak ada.")


class MalformedAuthHeaderException(UnauthorizedException):
    def __init__(self):
        super().__init__("Akses Ditolak. Format header Authorization salah.")


class TokenMalformedException(UnauthorizedException):
    def __init__(self):
        super().__init__("Token tidak berformat benar.")


class TokenExpiredException(UnauthorizedException):
    def __init__(self):
        super().__init__("Token sudah kadaluarsa atau belum aktif.")


class SignatureInvalidException(UnauthorizedException):
    def __init__(self):
        super().__init__("Signature token tidak valid.")


class TokenInvalidException(UnauthorizedException):
    def __init__(self):
        super().__init__("Token tidak valid.")


class TokenNotYetValidException(UnauthorizedException):
    def __init__(self):
        super().__init__("Token sudah kadaluarsa atau belum aktif.")
