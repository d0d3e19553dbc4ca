from sqlalchemy import MetaData

#   모든 테이블이 공유 (FK 해석 / create_all)
meta = MetaData()
