from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    contract_address: str
    name_tag: str
    project_name: str
    website_link: str
    note: str

    def to_dict(self) -> dict[str, str]:
        return {
            "contractAddress": self.contract_address,
            "nameTag": self.name_tag,
            "projectName": self.project_name,
            "websiteLink": self.website_link,
            "note": self.note,
        }
