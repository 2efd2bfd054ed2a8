"""Install and source configuration models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from chatmate.enums import SourceModeSetting


class InstallConfig(BaseModel):
    """Install configuration section.

    Attributes:
        destination: Directory the host application reads chatmates from.
            Empty means not configured.
        create_destination: Create the destination directory on install
            if it does not exist.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    destination: str = ""
    create_destination: bool = True


class SourceConfig(BaseModel):
    """Source configuration section.

    Attributes:
        mode: Where chatmates are read from. ``auto`` uses ``directory``
            when it exists, otherwise the bundled chatmates.
        directory: External source directory, relative to the working
            directory unless absolute.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    mode: SourceModeSetting = SourceModeSetting.AUTO
    directory: str = Field(default="mates", min_length=1)
