from pydantic import BaseModel, Field
from typing import List

class UploadResponse(BaseModel):
    message: str = "Images uploaded successfully"
    total_uploaded_size: str = Field(..., alias="totalUploadedSize", description="Megabytes with two decimals, e.g. '1.25 MB'")
    uploaded_file_names: List[str] = Field(default_factory=list, alias="uploadedFileNames")

    class Config:
        populate_by_name = True
