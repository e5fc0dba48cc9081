#!/usr/bin/env python3
"""
Lane Runner 啟動腳本
用法: python play.py [config.yaml]
"""

from lane_runner.app import main

if __name__ == "__main__":
    print("=" * 60)
    print("Lane Runner")
    print("方向鍵 / A D 換道，SPACE 重新開始，ESC 離開")
    print("=" * 60)
    main()
