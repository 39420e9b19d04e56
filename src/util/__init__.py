"""
どこで: `util` パッケージ。
何を: 色変換と構成読込みの小さなユーティリティ。
"""
