from lyric_prosody.app.cli import main

raise SystemExit(main())
