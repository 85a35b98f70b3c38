from cafeflow.helpers.office.google_drive import GoogleDriveHelper

__all__ = ['GoogleDriveHelper']
