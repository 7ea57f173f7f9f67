"""
Resume file storage - local upload directory or S3.
S3 objects live under {s3_key_prefix}/{user_id}/{filename}.
"""
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

from remotejobs.app.core.config import Settings
from remotejobs.app.core.errors import InternalError
from remotejobs.app.core.logging_config import get_logger

logger = get_logger("services.storage")


def _get_s3_client(settings: Settings):
    """Get configured S3 client."""
    if not settings.aws_access_key_id or not settings.aws_secret_access_key:
        raise InternalError("AWS credentials not configured (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY)")
    return boto3.client(
        "s3",
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
    )


def _s3_url(settings: Settings, key: str) -> str:
    return f"https://{settings.aws_bucket_name}.s3.{settings.aws_region}.amazonaws.com/{key}"


def upload_file_to_s3(
    settings: Settings,
    file_buffer: bytes,
    file_name: str,
    user_id: str,
    mime_type: str = "application/octet-stream",
) -> str:
    """Upload file to S3 and return its object URL."""
    key = f"{settings.s3_key_prefix}/{user_id}/{file_name}"

    logger.info(
        "S3 upload started bucket=%s key=%s user_id=%s size_bytes=%d",
        settings.aws_bucket_name,
        key,
        user_id,
        len(file_buffer),
    )
    try:
        s3 = _get_s3_client(settings)
        s3.put_object(
            Bucket=settings.aws_bucket_name,
            Key=key,
            Body=file_buffer,
            ContentType=mime_type,
        )
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "")
        msg = e.response.get("Error", {}).get("Message", str(e))
        logger.error(
            "S3 upload failed bucket=%s key=%s user_id=%s error_code=%s error_message=%s",
            settings.aws_bucket_name,
            key,
            user_id,
            code,
            msg,
        )
        raise InternalError("Failed to store resume") from e

    url = _s3_url(settings, key)
    logger.info("S3 upload success key=%s", key)
    return url


def parse_s3_key_from_url(settings: Settings, url: str) -> str | None:
    """Extract S3 object key from an object URL we issued. None if it isn't one."""
    if not url or not url.startswith("http"):
        return None
    # https://bucket.s3.region.amazonaws.com/resumes/<user>/file.pdf
    parts = url.replace("https://", "").replace("http://", "").split("/", 1)
    if len(parts) != 2:
        return None
    host, path = parts
    if settings.aws_bucket_name in host and path.startswith(f"{settings.s3_key_prefix}/"):
        return path
    return None


def delete_file_from_s3(settings: Settings, key: str) -> bool:
    """Delete object from S3 by key. Returns True on success, False on error."""
    try:
        s3 = _get_s3_client(settings)
        s3.delete_object(Bucket=settings.aws_bucket_name, Key=key)
    except (ClientError, InternalError) as e:
        logger.warning("S3 delete failed key=%s error=%s", key, e)
        return False
    logger.info("S3 delete success key=%s", key)
    return True


def save_local_file(settings: Settings, file_buffer: bytes, file_name: str) -> str:
    """Write into the upload dir and return the relative path stored on the user."""
    upload_path = Path(settings.upload_dir)
    upload_path.mkdir(parents=True, exist_ok=True)
    file_path = upload_path / file_name
    try:
        file_path.write_bytes(file_buffer)
    except OSError as e:
        logger.error("Failed to write resume path=%s error=%s", file_path, e)
        raise InternalError("Failed to store resume") from e
    return f"{settings.upload_dir.rstrip('/')}/{file_name}"


def store_resume(
    settings: Settings,
    file_buffer: bytes,
    file_name: str,
    user_id: str,
    mime_type: str = "application/octet-stream",
) -> str:
    """Persist a resume with the configured backend. Returns the stored path/URL."""
    if settings.resume_storage == "s3":
        return upload_file_to_s3(settings, file_buffer, file_name, user_id, mime_type)
    return save_local_file(settings, file_buffer, file_name)


def delete_stored_resume(settings: Settings, stored_path: str | None, user_id: str) -> bool:
    """Delete a previously stored resume. Returns True if deleted or nothing to delete."""
    if not stored_path:
        return True
    key = parse_s3_key_from_url(settings, stored_path)
    if key:
        return delete_file_from_s3(settings, key)

    local = Path(settings.upload_dir) / Path(stored_path).name
    if not local.exists():
        return True
    try:
        local.unlink()
    except OSError as e:
        logger.warning("Failed to delete local resume %s: %s", local, e)
        return False
    logger.info("Deleted local resume file user_id=%s path=%s", user_id, local)
    return True
