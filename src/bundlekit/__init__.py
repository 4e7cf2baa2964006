# pyright: reportUnusedImport=false
from bundlekit.bundle import Bundle, Entry
from bundlekit.builder import BundleBuilder
from bundlekit.kinds import Kind, infer_kind
from bundlekit.settings import BundleSettings, settings
