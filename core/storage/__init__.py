from core.storage.blob_store import BlobStore, BlobStoreError, LocalBlobStore

__all__ = ['BlobStore', 'BlobStoreError', 'LocalBlobStore']
